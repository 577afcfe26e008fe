"""Input events consumed by the selector loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class KeyAction(Enum):
    UP = auto()
    DOWN = auto()
    TOGGLE = auto()
    COMMIT = auto()
    CANCEL = auto()
    CHAR = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press. ``key`` keeps the raw sequence for CHAR/OTHER."""

    action: KeyAction
    key: str = ""


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


Event = KeyEvent | ResizeEvent
