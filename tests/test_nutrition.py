from __future__ import annotations

from typing import assert_type

import pytest
from pydantic import ValidationError

from kitchen.domain import InvalidFieldError, NutritionFacts, NutritionFactsBuilder


def test_build_applies_defaults_for_unset_fields() -> None:
    facts = NutritionFactsBuilder(24, 2).calories(12).sodium(144).build()

    assert facts.model_dump() == {
        "serving_size": 24,
        "servings": 2,
        "calories": 12,
        "fat": 0,
        "sodium": 144,
        "carbohydrate": 0,
    }


def test_setter_last_write_wins() -> None:
    facts = NutritionFactsBuilder(240, 8).fat(3).fat(7).build()
    assert facts.fat == 7


def test_builder_reuse_does_not_alter_previous_record() -> None:
    builder = NutritionFactsBuilder(240, 8).calories(100)
    first = builder.build()

    builder.calories(250).carbohydrate(30)
    second = builder.build()

    assert first.calories == 100
    assert first.carbohydrate == 0
    assert second.calories == 250
    assert second.carbohydrate == 30
    assert first is not second


def test_built_record_is_frozen() -> None:
    facts = NutritionFactsBuilder(24, 2).build()
    with pytest.raises(ValidationError):
        facts.calories = 50  # type: ignore[misc]


def test_negative_values_accepted_by_default() -> None:
    facts = NutritionFactsBuilder(-1, 2).sodium(-5).build()
    assert facts.serving_size == -1
    assert facts.sodium == -5


def test_strict_builder_rejects_negative_values() -> None:
    builder = NutritionFactsBuilder(24, 2, strict=True).fat(-3)

    with pytest.raises(InvalidFieldError) as excinfo:
        builder.build()

    assert excinfo.value.field_name == "fat"


def test_strict_builder_accepts_zero_and_positive_values() -> None:
    facts = NutritionFactsBuilder(24, 2, strict=True).calories(0).sodium(144).build()
    assert facts.sodium == 144


def test_non_integer_value_raises_invalid_field() -> None:
    builder = NutritionFactsBuilder(24, 2).calories("lots")  # type: ignore[arg-type]

    with pytest.raises(InvalidFieldError) as excinfo:
        builder.build()

    assert excinfo.value.field_name == "calories"
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_invalid_field_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        NutritionFactsBuilder(24, 2).fat(1.5).build()  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("field_name", "value"),
    [("calories", "12"), ("fat", True), ("fat", 2.0), ("servings", "2")],
)
def test_values_are_not_coerced_to_int(field_name: str, value: object) -> None:
    builder = NutritionFactsBuilder(24, 2)
    if field_name == "servings":
        builder = NutritionFactsBuilder(24, value)  # type: ignore[arg-type]
    else:
        getattr(builder, field_name)(value)

    with pytest.raises(InvalidFieldError) as excinfo:
        builder.build()

    assert excinfo.value.field_name == field_name


def test_builder_classmethod_and_chaining_types() -> None:
    builder = NutritionFacts.builder(24, 2, strict=True)
    assert builder.strict is True

    chained = builder.calories(12).fat(1)
    assert_type(chained, NutritionFactsBuilder)
    assert chained is builder
    assert_type(chained.build(), NutritionFacts)


def test_staged_values_snapshot_is_independent() -> None:
    builder = NutritionFactsBuilder(24, 2)
    snapshot = builder.staged_values()
    snapshot["calories"] = 999

    assert builder.build().calories == 0
