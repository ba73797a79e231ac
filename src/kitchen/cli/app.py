"""Typer CLI building nutrition labels and pizzas."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from kitchen.domain import (
    BuilderError,
    CalzoneBuilder,
    NutritionFactsBuilder,
    NyPizzaBuilder,
    Pizza,
    PizzaBuilder,
)
from kitchen.domain.base import DomainModel

from .deps import get_settings

app = typer.Typer(help="Build immutable nutrition labels and pizzas")


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings."""

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _render(title: str, model: DomainModel, as_json: bool) -> None:
    if as_json:
        typer.echo(model.model_dump_json(indent=2))
        return

    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value")
    for field_name, value in model.model_dump(mode="json").items():
        if isinstance(value, list):
            value = ", ".join(value) if value else "(none)"
        table.add_row(field_name, str(value))
    Console().print(table)


def _build_pizza(builder: PizzaBuilder[Pizza], toppings: list[str]) -> Pizza:
    for topping in toppings:
        builder.add_topping(topping)
    return builder.build()


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo("Strict Nutrition:\t" + str(settings.strict_nutrition).lower())


@app.command("nutrition")
def nutrition(
    serving_size: int,
    servings: int,
    calories: int | None = typer.Option(None, help="Calories per serving"),
    fat: int | None = typer.Option(None, help="Fat per serving (g)"),
    sodium: int | None = typer.Option(None, help="Sodium per serving (mg)"),
    carbohydrate: int | None = typer.Option(None, help="Carbohydrate per serving (g)"),
    strict: bool | None = typer.Option(
        None, "--strict/--lenient", help="Reject negative values (default from settings)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Build a nutrition facts label."""

    if strict is None:
        strict = get_settings().strict_nutrition

    builder = NutritionFactsBuilder(serving_size, servings, strict=strict)
    if calories is not None:
        builder.calories(calories)
    if fat is not None:
        builder.fat(fat)
    if sodium is not None:
        builder.sodium(sodium)
    if carbohydrate is not None:
        builder.carbohydrate(carbohydrate)

    try:
        facts = builder.build()
    except BuilderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _render("Nutrition Facts", facts, as_json)


@app.command("ny-pizza")
def ny_pizza(
    size: str,
    topping: list[str] = typer.Option([], "--topping", "-t", help="Topping to add (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Build a New York pizza of the given size."""

    try:
        pizza = _build_pizza(NyPizzaBuilder(size), topping)
    except BuilderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _render("NY Pizza", pizza, as_json)


@app.command("calzone")
def calzone(
    topping: list[str] = typer.Option([], "--topping", "-t", help="Topping to add (repeatable)"),
    sauce_inside: bool = typer.Option(False, "--sauce-inside", help="Put the sauce inside"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Build a calzone."""

    builder = CalzoneBuilder()
    if sauce_inside:
        builder.sauce_inside()

    try:
        pizza = _build_pizza(builder, topping)
    except BuilderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _render("Calzone", pizza, as_json)
