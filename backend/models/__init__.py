from .people import Owner, OwnerBase, OwnerForm
from .pets import Pet, PetType
from .response import OwnerPage, View, Redirect

__all__ = [
    "Owner",
    "OwnerBase",
    "OwnerForm",
    "Pet",
    "PetType",
    "OwnerPage",
    "View",
    "Redirect",
]
