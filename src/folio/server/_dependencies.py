from typing import cast

from fastapi import Request
from structlog.typing import FilteringBoundLogger

from folio.config import Config


def get_config(request: Request) -> Config:
    """Return the configuration the application was created with."""
    return cast("Config", request.app.state.config)


def get_logger(request: Request) -> FilteringBoundLogger:
    """Return the server's structured logger."""
    return cast("FilteringBoundLogger", request.app.state.logger)
