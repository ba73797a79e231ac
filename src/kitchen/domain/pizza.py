"""Pizza hierarchy and its self-typed builders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, Generic, Self, TypeVar

from .base import DomainModel
from .enums import Size, Topping
from .exceptions import InvalidFieldError, NullRequiredFieldError

logger = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=StrEnum)


def _lookup_member(enum_type: type[EnumT], value: EnumT | str) -> EnumT | None:
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        return None


def _require_member(enum_type: type[EnumT], value: EnumT | str | None, field_name: str) -> EnumT:
    if value is None:
        raise NullRequiredFieldError(field_name)
    member = _lookup_member(enum_type, value)
    if member is None:
        choices = ", ".join(item.value for item in enum_type)
        raise InvalidFieldError(field_name, f"{value!r} is not one of: {choices}")
    return member


class Pizza(DomainModel):
    """Fields shared by every pizza variant.

    Only the concrete variants can be instantiated; create them through their
    builders.
    """

    toppings: tuple[Topping, ...] = ()

    def model_post_init(self, context: Any, /) -> None:
        if type(self) is Pizza:
            msg = "Pizza is abstract; build a concrete variant such as NyPizza"
            raise TypeError(msg)
        super().model_post_init(context)


PizzaT = TypeVar("PizzaT", bound=Pizza, covariant=True)


class PizzaBuilder(ABC, Generic[PizzaT]):
    """Base builder owning the topping list shared by all variants.

    Mutators return ``Self`` so that a concrete builder keeps its own type
    through base-class calls, e.g. ``CalzoneBuilder().add_topping(...)`` still
    exposes ``sauce_inside``. ``build`` hands a tuple copy of the toppings to
    the pizza, so the builder may keep changing afterwards.
    """

    def __init__(self) -> None:
        self._toppings: list[Topping] = []

    @property
    def toppings(self) -> tuple[Topping, ...]:
        return tuple(self._toppings)

    def add_topping(self, topping: Topping | str) -> Self:
        self._toppings.append(_require_member(Topping, topping, "topping"))
        return self._self()

    def remove_topping(self, topping: Topping | str) -> Self:
        """Remove the first matching topping.

        Absent toppings, including values that name no topping at all, are
        ignored.
        """

        member = _lookup_member(Topping, topping)
        if member is not None and member in self._toppings:
            self._toppings.remove(member)
        else:
            logger.debug("Topping %r not staged; nothing to remove", topping)
        return self._self()

    @abstractmethod
    def build(self) -> PizzaT:
        """Create the immutable pizza from the staged values."""

    def _self(self) -> Self:
        return self


class NyPizza(Pizza):
    """New York style pizza; size is fixed when its builder is created."""

    size: Size

    @classmethod
    def builder(cls, size: Size | str) -> NyPizzaBuilder:
        return NyPizzaBuilder(size)


class NyPizzaBuilder(PizzaBuilder[NyPizza]):
    def __init__(self, size: Size | str) -> None:
        super().__init__()
        self._size = _require_member(Size, size, "size")

    @property
    def size(self) -> Size:
        return self._size

    def build(self) -> NyPizza:
        pizza = NyPizza(toppings=tuple(self._toppings), size=self._size)
        logger.debug("Built %s NY pizza with %d topping(s)", pizza.size, len(pizza.toppings))
        return pizza


class Calzone(Pizza):
    """Folded pizza with sauce either inside or served on the side."""

    sauce_inside: bool = False

    @classmethod
    def builder(cls) -> CalzoneBuilder:
        return CalzoneBuilder()


class CalzoneBuilder(PizzaBuilder[Calzone]):
    def __init__(self) -> None:
        super().__init__()
        self._sauce_inside = False

    def sauce_inside(self) -> Self:
        self._sauce_inside = True
        return self._self()

    def build(self) -> Calzone:
        calzone = Calzone(toppings=tuple(self._toppings), sauce_inside=self._sauce_inside)
        logger.debug(
            "Built calzone with %d topping(s), sauce_inside=%s",
            len(calzone.toppings),
            calzone.sauce_inside,
        )
        return calzone


__all__ = [
    "Calzone",
    "CalzoneBuilder",
    "NyPizza",
    "NyPizzaBuilder",
    "Pizza",
    "PizzaBuilder",
]
