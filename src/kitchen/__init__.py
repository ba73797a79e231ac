"""Fluent builders for immutable nutrition labels and pizzas."""

from .domain import (
    BuilderError,
    Calzone,
    CalzoneBuilder,
    InvalidFieldError,
    NullRequiredFieldError,
    NutritionFacts,
    NutritionFactsBuilder,
    NyPizza,
    NyPizzaBuilder,
    Pizza,
    PizzaBuilder,
    Size,
    Topping,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "Calzone",
    "CalzoneBuilder",
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
    "__version__",
]
