from typing import Any, Dict, List
from sqlmodel import SQLModel

from .people import Owner

class OwnerPage(SQLModel):
    """One page of owners matching a last-name search."""
    content: List[Owner]
    page: int
    per_page: int
    total: int
    total_pages: int

    @property
    def is_empty(self) -> bool:
        return not self.content

class View(SQLModel):
    """Template to render, the values handed to it and extra response headers."""
    template: str
    context: Dict[str, Any] = {}
    headers: Dict[str, str] = {}

class Redirect(SQLModel):
    url: str
