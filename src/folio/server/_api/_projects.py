from typing import Annotated

from fastapi import APIRouter, Depends

from folio.config import Config
from folio.projects import ProjectCard, resolve_projects
from folio.server._dependencies import get_config

router = APIRouter(prefix="", tags=["projects"])


@router.get("/projects")
def get_projects(config: Annotated[Config, Depends(get_config)]) -> list[ProjectCard]:
    return list(resolve_projects(config))
