from typing import Optional
from fastapi import APIRouter, Depends, Header, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.database import get_async_session
from core.templates import render_view
from core.validation import bind_owner_form
from services.owner_handler import OwnerHandler
from services.owner_service import OwnerService

router = APIRouter()

# largest page number the offset arithmetic can hand to the database
MAX_PAGE = 2**31 - 1


def is_htmx_request(hx_request: Optional[str] = Header(None, alias="HX-Request")) -> bool:
    return hx_request == "true"


def get_owner_handler(session: AsyncSession = Depends(get_async_session)) -> OwnerHandler:
    return OwnerHandler(OwnerService(session), page_size=settings.OWNERS_PAGE_SIZE)


@router.get("/owners/new", response_class=HTMLResponse, tags=["owners"])
async def init_creation_form(
    request: Request,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    return render_view(request, handler.init_creation_form(fragment))


@router.post("/owners/new", response_class=HTMLResponse, tags=["owners"])
async def process_creation_form(
    request: Request,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    owner, result = bind_owner_form(await request.form())
    return render_view(request, await handler.process_creation_form(owner, result, fragment))


@router.get("/owners/find", response_class=HTMLResponse, tags=["owners"])
async def init_find_form(
    request: Request,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    return render_view(request, handler.init_find_form(fragment))


@router.get("/owners", response_class=HTMLResponse, tags=["owners"])
async def process_find_form(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    last_name: Optional[str] = Query(None, alias="lastName"),
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    return render_view(request, await handler.process_find_form(last_name, page, fragment))


@router.get("/owners/{owner_id}/edit", response_class=HTMLResponse, tags=["owners"])
async def init_update_owner_form(
    request: Request,
    owner_id: int,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    return render_view(request, await handler.init_update_owner_form(owner_id, fragment))


@router.post("/owners/{owner_id}/edit", response_class=HTMLResponse, tags=["owners"])
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    owner, result = bind_owner_form(await request.form())
    return render_view(request, await handler.process_update_owner_form(owner, result, owner_id, fragment))


@router.get("/owners/{owner_id}", response_class=HTMLResponse, tags=["owners"])
async def show_owner(
    request: Request,
    owner_id: int,
    fragment: bool = Depends(is_htmx_request),
    handler: OwnerHandler = Depends(get_owner_handler)
):
    return render_view(request, await handler.show_owner(owner_id, fragment))
