from importlib.resources import files
from pathlib import Path

import platformdirs


def get_package_dir() -> Path:
    """Get the installation directory of the folio package."""
    return Path(str(files("folio")))


def get_templates_dir() -> Path:
    """Get the directory holding the built-in page templates."""
    return get_package_dir() / "templates"


def get_log_dir() -> Path:
    """Get the platform-specific folio log directory."""
    return platformdirs.user_log_path("folio")


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file."""
    return get_log_dir() / "cli.log"


def get_server_log_file() -> Path:
    """Get the path to the default server log file."""
    return get_log_dir() / "server.log"
