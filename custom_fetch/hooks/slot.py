# Tagged input for a single hook stage.

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Absent:
    """The stage's option was not supplied; the hook passes the context through."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Present:
    """The stage's option was supplied."""

    payload: Any


Slot = Union[Absent, Present]

ABSENT = Absent()


def slot_of(value: Any, empty_is_absent: bool = False) -> Slot:
    """Wrap an option value for a hook.

    ``None`` is always absent. With ``empty_is_absent``, an empty container
    (``{}``, ``[]``, an empty form) is absent too.
    """
    if value is None:
        return ABSENT
    if empty_is_absent and isinstance(value, Sized) and len(value) == 0:
        return ABSENT
    return Present(value)
