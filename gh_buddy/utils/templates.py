"""Loads and renders the Jinja2 templates shipped with gh-buddy."""

from pathlib import Path

import jinja2
import structlog
from pydantic import BaseModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATES_DIRECTORY),
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


def construct_packaged_template(template_name: str) -> jinja2.Template:
    """Load a template from the package's templates directory by file name."""
    try:
        return _environment.get_template(template_name)
    except jinja2.TemplateNotFound:
        logger.error("Packaged template not found", template_name=template_name, templates_directory=str(TEMPLATES_DIRECTORY))
        raise


def render_template_with_model(model: BaseModel, template: jinja2.Template) -> str:
    """Render a template with the fields of a Pydantic model as its context."""
    try:
        return template.render(model.model_dump())
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template with model", model_type=type(model).__name__, error=str(exc))
        raise
