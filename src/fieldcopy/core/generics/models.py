"""Generic resolution models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class GenericBase:
    """A parameterized direct base: ``Repo[User]`` -> origin=Repo, args=(User,)."""

    origin: Any
    args: tuple[Any, ...]


class TypeArgumentError(TypeError):
    """Raised when a superclass expected to be parameterized is not."""

    pass
