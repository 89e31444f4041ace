"""
Template rendering utilities
"""
from pathlib import Path
from typing import Union

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from models import View, Redirect

# Get templates directory
BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = BASE_DIR / "api" / "templates"

# Create FastAPI templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(template_name: str, context: dict, request: Request, headers: dict = None):
    """Render template with context"""
    return templates.TemplateResponse(request, template_name, context, headers=headers)


def render_view(request: Request, result: Union[View, Redirect]) -> Response:
    """Turn a handler result into a response; redirects use 303 so POSTs become GETs"""
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.url, status_code=303)
    return render_template(result.template, result.context, request, headers=result.headers)
