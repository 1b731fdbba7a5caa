"""Run detection for consecutive links or list items.

Renderers that group runs in container syntax keep one ``ListState`` per
run kind and advance it at every block of that kind, using only the kind
of the following block. A container opens when the state becomes
``ENTERING`` and closes when it becomes ``EXITING``; a block with no
neighbour of its kind stays ``NOT_IN_LIST`` and is rendered standalone.
"""

from __future__ import annotations

from enum import Enum


class ListState(Enum):
    NOT_IN_LIST = "not_in_list"
    ENTERING = "entering"
    IN_LIST = "in_list"
    EXITING = "exiting"

    @property
    def opens(self) -> bool:
        return self is ListState.ENTERING

    @property
    def closes(self) -> bool:
        return self is ListState.EXITING

    @property
    def is_member(self) -> bool:
        return self is not ListState.NOT_IN_LIST


def next_state(state: ListState, next_is_same: bool) -> ListState:
    """Advance ``state`` for the current block.

    Args:
        state: State left behind by the previous block of the same kind.
        next_is_same: Whether the block right after the current one is of
            the same kind.
    """
    if state in (ListState.NOT_IN_LIST, ListState.EXITING):
        if next_is_same:
            return ListState.ENTERING
        return ListState.NOT_IN_LIST
    if next_is_same:
        return ListState.IN_LIST
    return ListState.EXITING
