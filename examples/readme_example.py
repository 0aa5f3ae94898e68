from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel

from fieldcopy import (
    copy_create,
    copy_fields,
    interface_type_arguments,
    resolve_type_handle,
    try_copy_create,
)


@dataclass
class TaskRow:
    """Storage-side shape of a task."""

    id: int = 0
    title: str = ""
    tags: list[str] = field(default_factory=list)
    owner_id: int = 0


class TaskView(BaseModel):
    """API-side shape of a task. Shares id, title and tags with TaskRow."""

    id: int = 0
    title: str = ""
    tags: list[str] = []


class Handler[T](Protocol):
    def handle(self, item: T) -> None: ...


class TaskPrinter(Handler[TaskView]):
    def handle(self, item: TaskView) -> None:
        print(f"#{item.id} {item.title} {item.tags}")


def main() -> None:
    row = TaskRow(id=7, title="Write docs", tags=["docs"], owner_id=3)

    view = copy_create(row, TaskView)
    print(view)

    # Which type does TaskPrinter expect? Ask its Handler[...] base.
    (expected,) = interface_type_arguments(TaskPrinter(), Handler) or (None,)
    print("TaskPrinter handles", resolve_type_handle(expected))

    printer = TaskPrinter()
    if view is not None:
        printer.handle(view)

    # Refresh an existing row in place
    fresh = TaskRow()
    copy_fields(row, fresh)
    print(fresh == row, fresh.tags is row.tags)

    # Explicit outcome
    result = try_copy_create(row, dict)
    print(result.status, result.describe())


if __name__ == "__main__":
    main()
