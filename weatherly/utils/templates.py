"""
Template rendering utilities
"""
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def blank(value) -> str:
    """Render missing values as an empty string."""
    return "" if value is None else str(value)


templates.env.filters["blank"] = blank


def render_template(template_name: str, context: dict, request: Request):
    """Render template with context"""
    return templates.TemplateResponse(request, template_name, context)
