# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Project card commands."""

# Importing the command modules registers them with the app
from . import _list as _list, _validate as _validate
from ._app import app

__all__ = ["app"]
