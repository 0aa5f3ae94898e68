"""Copy outcomes.

Usage:
    result = try_copy_create(source, Target)
    if result.ok:
        use(result.instance)
    elif result.status is CopyStatus.CONSTRUCTION_FAILED:
        raise result.error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class CopyStatus(Enum):
    """How a copy operation ended."""

    COPIED = auto()  # Completed, possibly with nothing matched
    NO_MEMBERS = auto()  # Source or target type declares no members
    CONSTRUCTION_FAILED = auto()  # target_type() raised
    ACCESS_FAILED = auto()  # A member write was rejected


@dataclass
class CopyResult[T]:
    """Outcome of a copy, with the members written before it ended."""

    status: CopyStatus
    instance: T | None = None
    copied: list[str] = field(default_factory=list)
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """True if the copy completed."""
        return self.status is CopyStatus.COPIED

    def describe(self) -> str:
        """Human-readable summary, used for diagnostics."""
        if self.ok:
            return f"copied {len(self.copied)} member(s)"
        reason = self.status.name.lower().replace("_", " ")
        detail = f": {self.error}" if self.error is not None else ""
        return f"{reason} after {len(self.copied)} member(s){detail}"


class CopyWarning(UserWarning):
    """Emitted when a failed copy is reported only as None/False."""

    pass
