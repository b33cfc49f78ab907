# pyright: reportUnusedCallResult=false
"""Development server command."""

import os
import socket
from typing import Annotated, Literal, cast

from cyclopts import App, Parameter

from folio.cli._context import CLIContext

app = App(name="serve", help="Serve the site over HTTP", help_on_error=True)

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


def find_open_port(host: str) -> int:
    """Find an available port by binding to port 0."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        addr = cast("tuple[str, int]", s.getsockname())
        return addr[1]


@app.default
def serve(
    *,
    host: Annotated[str, Parameter(help="Bind socket to this host.")] = "127.0.0.1",
    port: Annotated[
        int,
        Parameter(help="Bind socket to this port. If 0, an available port is selected."),
    ] = 8000,
    reload: Annotated[
        bool,
        Parameter(help="Reload on code changes."),
    ] = False,
    log_level: Annotated[LogLevel, Parameter(help="Uvicorn log level.")] = "info",
    access_log: Annotated[bool, Parameter(help="Enable access log.")] = True,
) -> None:
    """Run the folio web server using uvicorn."""
    import uvicorn

    from folio.server import create_app, launch_environment
    from folio.utils import get_package_dir

    ctx = CLIContext.get_current()
    effective_port = find_open_port(host) if port == 0 else port

    if ctx.logger is not None:
        ctx.logger.bind(command="serve").info(
            "serve_requested", host=host, port=effective_port, reload=reload
        )

    print(f"Serving folio on http://{host}:{effective_port}/projects")

    if reload:
        # Reload needs an import string; the worker rebuilds config from these
        os.environ.update(
            launch_environment(
                config_path=ctx.config_path,
                project_root=ctx.project_root,
                cli_overrides=ctx.cli_overrides,
            )
        )
        uvicorn.run(
            "folio.server:create_app",
            factory=True,
            host=host,
            port=effective_port,
            reload=True,
            reload_dirs=[str(get_package_dir())],
            log_level=log_level,
            access_log=access_log,
        )
        return

    uvicorn.run(
        create_app(ctx.config),
        host=host,
        port=effective_port,
        log_level=log_level,
        access_log=access_log,
    )
