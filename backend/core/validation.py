import logging
from typing import Any, List, Mapping, Tuple

from pydantic import BaseModel, ValidationError

from models.people import Owner, OwnerForm


logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    field: str
    code: str
    message: str


class BindingResult(BaseModel):
    """Field-level errors collected while binding a submitted form."""
    errors: List[FieldError] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def reject_value(self, field: str, code: str, message: str) -> None:
        self.errors.append(FieldError(field=field, code=code, message=message))

    def errors_for(self, field: str) -> List[str]:
        return [error.message for error in self.errors if error.field == field]

    def has_field_errors(self, field: str) -> bool:
        return any(error.field == field for error in self.errors)


def _raw_owner_values(data: Mapping[str, Any]) -> dict:
    values = {}
    for name, field in OwnerForm.model_fields.items():
        value = data.get(field.alias, data.get(name, ""))
        values[name] = value if isinstance(value, str) else ""
    return values


def _form_name(loc) -> str:
    # defaults validated for missing fields report the python name, not the alias
    name = str(loc)
    if name in OwnerForm.model_fields:
        return OwnerForm.model_fields[name].alias or name
    return name


def bind_owner_form(data: Mapping[str, Any]) -> Tuple[Owner, BindingResult]:
    """Bind submitted form data to a new, unsaved Owner.

    ``id`` is never bound. On validation errors the returned owner carries the
    raw submitted values so the form can be shown again.
    """
    submitted = {key: value for key, value in data.items() if key != "id"}
    result = BindingResult()
    try:
        form = OwnerForm.model_validate(submitted)
    except ValidationError as e:
        for error in e.errors():
            field = _form_name(error["loc"][0]) if error["loc"] else ""
            result.reject_value(field, error["type"], error["msg"])
        logger.debug(f"Owner form rejected: {[error.field for error in result.errors]}")
        return Owner(**_raw_owner_values(submitted)), result

    return Owner(**form.model_dump()), result
