"""Domain layer exports."""

from .base import DomainModel
from .enums import Size, Topping
from .exceptions import BuilderError, InvalidFieldError, NullRequiredFieldError
from .nutrition import NutritionFacts, NutritionFactsBuilder
from .pizza import Calzone, CalzoneBuilder, NyPizza, NyPizzaBuilder, Pizza, PizzaBuilder

__all__ = [
    "BuilderError",
    "Calzone",
    "CalzoneBuilder",
    "DomainModel",
    "InvalidFieldError",
    "NullRequiredFieldError",
    "NutritionFacts",
    "NutritionFactsBuilder",
    "NyPizza",
    "NyPizzaBuilder",
    "Pizza",
    "PizzaBuilder",
    "Size",
    "Topping",
]
