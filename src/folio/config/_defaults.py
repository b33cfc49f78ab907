"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "site": {
        "title": "",
        "description": "",
        "url": "",
        "author": "",
        "language": "en",
        "static_dir": "",
        "template_dir": "",
    },
    "projects": {
        "file": "",
    },
}
