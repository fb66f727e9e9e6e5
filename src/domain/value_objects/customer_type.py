from __future__ import annotations

from enum import Enum


class CustomerType(str, Enum):
    MILKMAN = "milkman"
    REGULAR = "regular"
