"""HTTP server for the rendered site.

Run with uvicorn's factory mode:

    uvicorn --factory folio.server:create_app
"""

from ._app import create_app, launch_environment

__all__ = ["create_app", "launch_environment"]
