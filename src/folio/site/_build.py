"""Static site build."""

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from folio.config import Config
from folio.exceptions import BuildError
from folio.pages import PROJECTS_PATH, render_site_projects_page

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

INDEX_FILE = "index.html"


def _page_output_path(output_dir: Path, page_path: str) -> Path:
    return output_dir.joinpath(*page_path.strip("/").split("/"), INDEX_FILE)


def _write_page(path: Path, html: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        msg = f"Failed to write {path}: {e}"
        raise BuildError(msg, path=path) from e


def _copy_static(static_dir: Path, output_dir: Path) -> list[Path]:
    copied: list[Path] = []
    for source in sorted(static_dir.rglob("*")):
        if not source.is_file():
            continue
        destination = output_dir / source.relative_to(static_dir)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            copied.append(Path(shutil.copy2(source, destination)))
        except OSError as e:
            msg = f"Failed to copy {source} to {destination}: {e}"
            raise BuildError(msg, path=destination) from e
    return copied


def build_site(
    output_dir: Path,
    *,
    config: Config | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> list[Path]:
    """Render the site into `output_dir`.

    Writes the projects page to ``<output_dir>/projects/index.html`` and,
    when ``site.static_dir`` is configured and exists, copies its files into
    `output_dir` preserving their relative paths.

    Args:
        output_dir: Destination directory, created if missing.
        config: Loaded configuration. Defaults to built-in defaults.
        logger: Optional structured logger for build events.

    Returns:
        Paths of all written files, page first.

    Raises:
        BuildError: If an output file cannot be written.
        FileNotFoundError: If the configured projects file does not exist.
        ProjectDataError: If the configured projects file is invalid.
    """
    if config is None:
        config = Config.from_dict({})

    html = render_site_projects_page(config)
    page_path = _page_output_path(output_dir, PROJECTS_PATH)

    copied: list[Path] = []
    static_dir = config.resolve_path(config.site.static_dir)
    if static_dir is not None:
        if static_dir.is_dir():
            copied = _copy_static(static_dir, output_dir)
            if logger is not None:
                logger.info("static_copied", source=str(static_dir), files=len(copied))
        elif logger is not None:
            logger.warning("static_dir_missing", path=str(static_dir))

    # The page replaces any static file at the same path
    _write_page(page_path, html)
    if logger is not None:
        logger.info("page_written", path=str(page_path), bytes=len(html.encode()))
        if page_path in copied:
            logger.warning("static_file_replaced", path=str(page_path))

    return [page_path, *(path for path in copied if path != page_path)]
