"""Command-line entrypoints for chembalancer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, NoReturn

import typer

from chembalancer.balancer import balance_equation
from chembalancer.classifier import classify_reaction, format_reaction_type
from chembalancer.elements import PERIODIC_TABLE
from chembalancer.errors import EquationError
from chembalancer.formatting import format_chemical_equation
from chembalancer.matrix import DEFAULT_CONFIGURATION, BalancerConfiguration
from chembalancer.parser import parse_equation
from chembalancer.validator import (
    Severity,
    element_suggestion,
    validate_equation,
    validate_equation_string,
)
from chembalancer.weights import (
    calculate_molecular_weight,
    format_molecular_weight,
    percent_composition,
)

app = typer.Typer(add_completion=False, help="Balance chemical equations.")

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_configuration(config_file: Path | None) -> BalancerConfiguration:
    if config_file is None:
        return DEFAULT_CONFIGURATION
    with open(config_file, "r") as f:
        data: Dict[str, Any] = json.load(f)
    logger.debug("Loaded solver configuration from %s", config_file)
    try:
        return BalancerConfiguration.from_mapping(data)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _fail(error: EquationError) -> NoReturn:
    typer.echo(f"{error.code}: {error.message}", err=True)
    if error.suggestion:
        typer.echo(f"Suggestion: {error.suggestion}", err=True)
    raise typer.Exit(code=1)


@app.command()
def balance(
    equation: Annotated[str, typer.Argument(help='Equation such as "H2 + O2 -> H2O".')],
    as_json: Annotated[bool, typer.Option("--json", help="Print the full result as JSON.")] = False,
    pretty: Annotated[bool, typer.Option(help="Render subscripts in the output.")] = False,
    config_file: Annotated[
        Path | None, typer.Option("--config", help="Path to JSON solver configuration.")
    ] = None,
    output: Annotated[
        Path | None, typer.Option(help="Path to save the result as JSON.")
    ] = None,
) -> None:
    """Balance an equation and explain the steps."""
    configuration = _load_configuration(config_file)
    try:
        result = balance_equation(equation, configuration)
    except EquationError as error:
        _fail(error)

    payload = result.to_dict()
    json_output = json.dumps(payload, indent=2, ensure_ascii=False)
    if as_json:
        typer.echo(json_output)
    else:
        balanced = format_chemical_equation(result.balanced) if pretty else result.balanced
        typer.echo(balanced)
        typer.echo(f"Reaction type: {format_reaction_type(result.metadata.reaction_type)}")
        for index, step in enumerate(result.steps, start=1):
            typer.echo(f"\n{index}. {step.title}\n{step.description}")

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(json_output)


@app.command()
def weigh(
    formula: Annotated[str, typer.Argument(help="Chemical formula such as Ca(OH)2.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
) -> None:
    """Compute the molecular weight and mass composition of a formula."""
    try:
        weight = calculate_molecular_weight(formula)
        composition = percent_composition(formula)
    except EquationError as error:
        _fail(error)

    if as_json:
        payload = weight.to_dict()
        payload["percent_composition"] = composition
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"{weight.compound}: {format_molecular_weight(weight.weight)}")
    for item in weight.breakdown:
        typer.echo(f"  {item.symbol} x{item.count}  {composition[item.symbol]:.2f}%")


@app.command()
def validate(
    equation: Annotated[str, typer.Argument(help="Equation to check.")],
) -> None:
    """List every validation issue found in an equation."""
    report = validate_equation_string(equation)
    issues = list(report.issues)
    if report.valid:
        try:
            issues.extend(validate_equation(parse_equation(equation)).issues)
        except EquationError as error:
            _fail(error)

    if not issues:
        typer.echo("No issues found.")
    for issue in issues:
        line = f"[{issue.severity.value}] {issue.code}: {issue.message}"
        if issue.suggestion:
            line += f" ({issue.suggestion})"
        typer.echo(line)

    if any(issue.severity is Severity.ERROR for issue in issues):
        raise typer.Exit(code=1)


@app.command()
def classify(
    equation: Annotated[str, typer.Argument(help="Equation to classify.")],
) -> None:
    """Classify a reaction by its structural shape."""
    try:
        info = classify_reaction(parse_equation(equation))
    except EquationError as error:
        _fail(error)
    typer.echo(f"{format_reaction_type(info.type)}: {info.description}")


@app.command()
def element(
    symbol: Annotated[str, typer.Argument(help="Element symbol such as Fe.")],
) -> None:
    """Show periodic-table data for an element."""
    record = PERIODIC_TABLE.get(symbol)
    if record is None:
        typer.echo(f"Unknown element: {symbol}", err=True)
        typer.echo(f"Suggestion: {element_suggestion(symbol)}", err=True)
        raise typer.Exit(code=1)
    typer.echo(
        json.dumps(
            {
                "symbol": record.symbol,
                "name": record.name,
                "atomic_number": record.atomic_number,
                "atomic_mass": record.atomic_mass,
                "category": record.category,
            },
            indent=2,
        )
    )
