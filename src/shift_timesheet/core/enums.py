from __future__ import annotations

from enum import Enum


class EntryType(str, Enum):
    """Kind of worked shift, drives how overtime is paid."""

    REGULAR = "regular"
    EXTRAORDINARY = "extraordinary"
