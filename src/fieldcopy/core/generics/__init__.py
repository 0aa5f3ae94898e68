"""Generic functionality: type arguments at generic bases and type loading."""

from fieldcopy.core.generics.models import GenericBase, TypeArgumentError
from fieldcopy.core.generics.operations import (
    generic_bases,
    interface_type_arguments,
    resolve_type_handle,
    superclass_type_arguments,
    type_name,
)

__all__ = [
    # Models
    "GenericBase",
    "TypeArgumentError",
    # Operations
    "generic_bases",
    "interface_type_arguments",
    "superclass_type_arguments",
    "resolve_type_handle",
    "type_name",
]
