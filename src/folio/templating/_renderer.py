"""Template rendering engine."""

from collections.abc import Mapping
from typing import cast

from jinja2 import Environment
from pydantic import BaseModel

from ._environment import create_environment


def _to_context(context: BaseModel | Mapping[str, object]) -> dict[str, object]:
    if isinstance(context, BaseModel):
        return context.model_dump()
    return dict(context)


def render_template(
    name: str,
    context: BaseModel | Mapping[str, object],
    *,
    env: Environment | None = None,
) -> str:
    """Render a named template with context.

    Args:
        name: Template name, looked up through the environment's loaders.
        context: Pydantic model or mapping of template variables. Models are
            dumped to plain dicts; pass a mapping to keep model instances.
        env: Optional Jinja2 Environment. Defaults to the built-in templates.

    Returns:
        Rendered template content.

    Raises:
        jinja2.TemplateNotFound: If no loader provides the template.
    """
    if env is None:
        env = create_environment()
    template = env.get_template(name)
    return cast("str", template.render(_to_context(context)))


def render_template_string(
    template_str: str,
    context: BaseModel | Mapping[str, object],
    *,
    env: Environment | None = None,
) -> str:
    """Render an inline Jinja2 template string with context.

    Inline templates are autoescaped.
    """
    if env is None:
        env = create_environment()
    template = env.from_string(template_str)
    return cast("str", template.render(_to_context(context)))
