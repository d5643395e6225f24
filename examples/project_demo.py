"""Walk a two-field project through a fixed series of edits and undos.

Run with ``python examples/project_demo.py`` after installing the package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reversible_edit import (
    EditableSequence,
    FieldRouter,
    History,
    LoggingMiddleware,
    RoutedAction,
)


@dataclass
class Project:
    nums: EditableSequence[int]
    strs: EditableSequence[str]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    project = Project(
        nums=EditableSequence([1, 2, 3]),
        strs=EditableSequence(["a", "b", "c"]),
    )
    history = History(
        FieldRouter.from_attributes("nums", "strs"),
        middlewares=[LoggingMiddleware()],
    )

    history.record(project, RoutedAction.delete("nums", 0))
    assert project.nums == [2, 3]
    history.record(project, RoutedAction.delete("strs", 0))
    assert project.strs == ["b", "c"]

    history.undo(project)
    assert project.strs == ["a", "b", "c"]
    assert project.nums == [2, 3]
    history.undo(project)
    assert project.nums == [1, 2, 3]

    history.record(project, RoutedAction.add("nums", 0))
    assert project.nums == [1, 2, 3, 0]
    history.undo(project)
    assert project.nums == [1, 2, 3]

    history.record(project, RoutedAction.edit("nums", 0, 10))
    assert project.nums == [10, 2, 3]
    history.undo(project)
    assert project.nums == [1, 2, 3]

    history.redo(project)
    assert project.nums == [10, 2, 3]

    print(f"nums={project.nums.to_list()} strs={project.strs.to_list()}")


if __name__ == "__main__":
    main()
