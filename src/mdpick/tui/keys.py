"""Keyboard input helpers.

Predicates over raw ``readchar`` key strings, plus ``decode_key`` which maps
a key to the action the selector understands.
"""

from __future__ import annotations

import readchar

from .events import KeyAction, KeyEvent


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations).

    On POSIX, readchar reads one more byte after a bare Esc, so a single
    press arrives as ESC followed by the next key. Anything of that shape
    that is not a CSI/SS3 sequence (``ESC [``, ``ESC O``) counts as Escape.
    """
    if key in (readchar.key.ESC, "\x1b", "\x1b\x1b"):
        return True
    return len(key) == 2 and key[0] == "\x1b" and key[1] not in "[O"


def is_interrupt(key: str) -> bool:
    return key == readchar.key.CTRL_C


def is_exit(key: str) -> bool:
    """Check if key is a quit key (q or Q)."""
    return key in ("q", "Q")


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def decode_key(key: str) -> KeyEvent:
    """Translate a raw key into a KeyEvent."""
    if is_escape(key) or is_interrupt(key) or is_exit(key):
        return KeyEvent(KeyAction.CANCEL, key)
    if is_up(key):
        return KeyEvent(KeyAction.UP, key)
    if is_down(key):
        return KeyEvent(KeyAction.DOWN, key)
    if is_space(key):
        return KeyEvent(KeyAction.TOGGLE, key)
    if is_enter(key):
        return KeyEvent(KeyAction.COMMIT, key)
    if len(key) == 1 and key.isprintable():
        return KeyEvent(KeyAction.CHAR, key)
    return KeyEvent(KeyAction.OTHER, key)
