import logging
from typing import Optional, Union
from urllib.parse import urlencode

from core.validation import BindingResult
from models import Owner, View, Redirect
from services.owner_service import OwnerService

logger = logging.getLogger(__name__)

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm.html"
VIEWS_FIND_OWNERS = "owners/findOwners.html"
VIEWS_OWNERS_LIST = "owners/ownersList.html"
VIEWS_OWNER_DETAILS = "owners/ownerDetails.html"

FRAGMENT_OWNER_EDIT = "fragments/owners/edit.html"
FRAGMENT_FIND_FORM = "fragments/owners/find_form.html"
FRAGMENT_OWNERS_LIST = "fragments/owners/list.html"
FRAGMENT_OWNER_DETAILS = "fragments/owners/details.html"

PUSH_URL_HEADER = "HX-Push-Url"


def _view(fragment: bool, page_template: str, fragment_template: str) -> str:
    return fragment_template if fragment else page_template


def _owner_form_view(fragment: bool) -> str:
    return _view(fragment, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, FRAGMENT_OWNER_EDIT)


def _find_form_view(fragment: bool) -> str:
    return _view(fragment, VIEWS_FIND_OWNERS, FRAGMENT_FIND_FORM)


class OwnerHandler:
    """Request handling for the owner pages.

    Every operation takes a ``fragment`` flag. It only picks between the
    full-page template and its htmx fragment counterpart; the data handed to
    the template is the same either way.
    """

    def __init__(self, owners: OwnerService, page_size: int = 5):
        self.owners = owners
        self.page_size = page_size

    def init_creation_form(self, fragment: bool = False) -> View:
        return View(
            template=_owner_form_view(fragment),
            context={"owner": Owner(), "errors": BindingResult()},
        )

    async def process_creation_form(
        self, owner: Owner, result: BindingResult, fragment: bool = False
    ) -> Union[View, Redirect]:
        if result.has_errors:
            return View(
                template=_owner_form_view(fragment),
                context={"owner": owner, "errors": result},
            )

        owner = await self.owners.save(owner)
        logger.info(f"Created owner {owner.id}")
        return Redirect(url=f"/owners/{owner.id}")

    def init_find_form(self, fragment: bool = False) -> View:
        return View(template=_find_form_view(fragment))

    async def process_find_form(
        self,
        last_name: Optional[str] = None,
        page: int = 1,
        fragment: bool = False,
        result: Optional[BindingResult] = None,
    ) -> Union[View, Redirect]:
        result = result if result is not None else BindingResult()
        # no lastName parameter means the broadest possible search
        if last_name is None:
            last_name = ""

        owners_results = await self.owners.find_by_last_name(last_name, page, self.page_size)
        if owners_results.is_empty:
            result.reject_value("lastName", "notFound", "not found")
            return View(
                template=_find_form_view(fragment),
                context={"owner": Owner(last_name=last_name), "errors": result},
            )

        if owners_results.total == 1:
            owner = owners_results.content[0]
            return Redirect(url=f"/owners/{owner.id}")

        push_url = "/owners?" + urlencode({"lastName": last_name, "page": page})
        return View(
            template=_view(fragment, VIEWS_OWNERS_LIST, FRAGMENT_OWNERS_LIST),
            context={
                "owner": Owner(last_name=last_name),
                "list_owners": owners_results.content,
                "current_page": page,
                "total_pages": owners_results.total_pages,
                "total_items": owners_results.total,
            },
            headers={PUSH_URL_HEADER: push_url},
        )

    async def init_update_owner_form(self, owner_id: int, fragment: bool = False) -> View:
        owner = await self.owners.get_owner_by_id(owner_id)
        return View(
            template=_owner_form_view(fragment),
            context={"owner": owner, "errors": BindingResult()},
            headers={PUSH_URL_HEADER: f"/owners/{owner_id}/edit"} if fragment else {},
        )

    async def process_update_owner_form(
        self, owner: Owner, result: BindingResult, owner_id: int, fragment: bool = False
    ) -> Union[View, Redirect]:
        # the path decides which owner is updated, whatever id came with the form
        owner.id = owner_id
        if result.has_errors:
            return View(
                template=_owner_form_view(fragment),
                context={"owner": owner, "errors": result},
            )

        await self.owners.save(owner)
        logger.info(f"Updated owner {owner_id}")
        return Redirect(url=f"/owners/{owner_id}")

    async def show_owner(self, owner_id: int, fragment: bool = False) -> View:
        owner = await self.owners.get_owner_by_id(owner_id)
        return View(
            template=_view(fragment, VIEWS_OWNER_DETAILS, FRAGMENT_OWNER_DETAILS),
            context={"owner": owner},
            headers={PUSH_URL_HEADER: f"/owners/{owner_id}"} if fragment else {},
        )
