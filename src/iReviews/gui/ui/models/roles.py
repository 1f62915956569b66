"""Custom item roles published by :class:`ReviewsListModel`."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


class Roles(IntEnum):
    ROW = int(Qt.UserRole) + 1
    KIND = int(Qt.UserRole) + 2
    ROW_ID = int(Qt.UserRole) + 3
    USER_NAME = int(Qt.UserRole) + 4
    TEXT = int(Qt.UserRole) + 5
    CREATED = int(Qt.UserRole) + 6
    RATING_IMAGE = int(Qt.UserRole) + 7
    AVATAR = int(Qt.UserRole) + 8
    AVATAR_URL = int(Qt.UserRole) + 9
    MAX_LINES = int(Qt.UserRole) + 10
    SHOW_MORE_VISIBLE = int(Qt.UserRole) + 11
    LAYOUT = int(Qt.UserRole) + 12
    COUNT = int(Qt.UserRole) + 13


LAYOUT_ROLES = frozenset({Roles.SHOW_MORE_VISIBLE, Roles.LAYOUT})
"""Roles whose value depends on the row geometry at the current width."""


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Return *base* extended with camel-cased names for every custom role."""

    names: Dict[int, bytes] = dict(base or {})
    for role in Roles:
        head, *tail = role.name.lower().split("_")
        names[int(role)] = (head + "".join(part.title() for part in tail)).encode("ascii")
    return names


__all__ = ["Roles", "LAYOUT_ROLES", "role_names"]
