"""Projects configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class ProjectsConfig(BaseModel):
    """Projects configuration section.

    Attributes:
        file: YAML or TOML file holding the project cards. Empty uses the
            built-in cards.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    file: str = ""
