"""Enumerations used by the kitchen domain layer."""

from __future__ import annotations

from enum import StrEnum


class Topping(StrEnum):
    """Toppings shared by every pizza variant."""

    HAM = "ham"
    MUSHROOM = "mushroom"
    ONION = "onion"
    PEPPER = "pepper"
    SAUSAGE = "sausage"


class Size(StrEnum):
    """New York pizza sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
