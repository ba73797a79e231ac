"""Nutrition facts record and its fixed-shape builder."""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import ValidationError

from .base import DomainModel
from .exceptions import InvalidFieldError

logger = logging.getLogger(__name__)


class NutritionFacts(DomainModel):
    """Label values for one packaged food.

    ``serving_size`` is in millilitres and ``servings`` is the number of
    servings per container. The optional amounts are per serving.
    """

    serving_size: int
    servings: int
    calories: int = 0
    fat: int = 0
    sodium: int = 0
    carbohydrate: int = 0

    @classmethod
    def builder(
        cls, serving_size: int, servings: int, *, strict: bool = False
    ) -> NutritionFactsBuilder:
        return NutritionFactsBuilder(serving_size, servings, strict=strict)


class NutritionFactsBuilder:
    """Stage nutrition values and produce independent ``NutritionFacts``.

    Values are stored verbatim. Negative amounts are accepted unless the
    builder is created with ``strict=True``, in which case ``build`` rejects
    them with :class:`InvalidFieldError`. A builder may be mutated and built
    again; records already built are never affected.
    """

    def __init__(self, serving_size: int, servings: int, *, strict: bool = False) -> None:
        self._serving_size = serving_size
        self._servings = servings
        self._strict = strict
        self._calories = 0
        self._fat = 0
        self._sodium = 0
        self._carbohydrate = 0

    @property
    def strict(self) -> bool:
        return self._strict

    def calories(self, value: int) -> Self:
        self._calories = value
        return self

    def fat(self, value: int) -> Self:
        self._fat = value
        return self

    def sodium(self, value: int) -> Self:
        self._sodium = value
        return self

    def carbohydrate(self, value: int) -> Self:
        self._carbohydrate = value
        return self

    def staged_values(self) -> dict[str, Any]:
        """Return a snapshot of every staged field, defaults included."""

        return {
            "serving_size": self._serving_size,
            "servings": self._servings,
            "calories": self._calories,
            "fat": self._fat,
            "sodium": self._sodium,
            "carbohydrate": self._carbohydrate,
        }

    def build(self) -> NutritionFacts:
        try:
            facts = NutritionFacts(**self.staged_values())
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else "nutrition_facts"
            raise InvalidFieldError(field_name, error["msg"]) from exc

        if self._strict:
            _ensure_non_negative(facts)

        logger.debug("Built nutrition facts %s", facts.model_dump())
        return facts


def _ensure_non_negative(facts: NutritionFacts) -> None:
    for field_name, value in facts.model_dump().items():
        if value < 0:
            raise InvalidFieldError(field_name, f"must be >= 0, got {value}")


__all__ = ["NutritionFacts", "NutritionFactsBuilder"]
