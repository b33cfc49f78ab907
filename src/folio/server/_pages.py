from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from structlog.typing import FilteringBoundLogger

from folio.config import Config
from folio.pages import PROJECTS_PATH, render_site_projects_page
from folio.server._dependencies import get_config, get_logger

router = APIRouter(include_in_schema=False)


@router.get("/")
async def get_index() -> RedirectResponse:
    return RedirectResponse(url=PROJECTS_PATH.rstrip("/"))


@router.get("/projects", response_class=HTMLResponse)
@router.get(PROJECTS_PATH, response_class=HTMLResponse)
def get_projects_page(
    config: Annotated[Config, Depends(get_config)],
    logger: Annotated[FilteringBoundLogger, Depends(get_logger)],
) -> HTMLResponse:
    html = render_site_projects_page(config)
    logger.debug("page_rendered", path=PROJECTS_PATH, bytes=len(html.encode()))
    return HTMLResponse(content=html)
