"""Folio utilities."""

from ._logging import LogFormatType, create_cli_logger, create_logger, create_server_logger
from ._paths import (
    get_cli_log_file,
    get_log_dir,
    get_package_dir,
    get_server_log_file,
    get_templates_dir,
)

__all__ = [
    "LogFormatType",
    "create_cli_logger",
    "create_logger",
    "create_server_logger",
    "get_cli_log_file",
    "get_log_dir",
    "get_package_dir",
    "get_server_log_file",
    "get_templates_dir",
]
