"""Typer CLI entrypoints."""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from l1.config.settings import load_settings
from l1.core.ast import sum_to_zero
from l1.core.errors import CrossCheckError
from l1.core.store import Store
from l1.core.types import INT64_MAX
from l1.logging_utils import configure_logging
from l1.program import Program

app = typer.Typer(name="l1", help="Small-step interpreter for the L1 language", add_completion=False)

COUNTER = "l1"
ACCUMULATOR = "l2"


def _demo_program(counter: int) -> Program:
    return Program(sum_to_zero(COUNTER, ACCUMULATOR), Store({COUNTER: counter, ACCUMULATOR: 0}))


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        demo()


@app.command()
def demo(
    counter: Annotated[int | None, typer.Option("--counter", "-n", min=0, max=INT64_MAX, help="Starting value of l1.")] = None,
    trace: Annotated[bool | None, typer.Option("--trace/--no-trace", help="Print every store change.")] = None,
    cross_check: Annotated[
        bool | None,
        typer.Option("--cross-check/--no-cross-check", help="Compare against the reference evaluator."),
    ] = None,
) -> None:
    """Sum the integers from l1 down to 1 into l2."""
    settings = load_settings(demo_counter=counter, trace=trace, demo_cross_check=cross_check)
    configure_logging(profile="cli", log_filter=settings.log_filter)
    console = Console()

    program = _demo_program(settings.demo_counter)
    logger.info("demo.start counter={} cross_check={}", settings.demo_counter, settings.demo_cross_check)

    initial = program.get_state()
    console.print(f"Initial: {initial.deref(COUNTER)} {initial.deref(ACCUMULATOR)}")
    if settings.trace:
        for state in program.state_changes():
            console.print(f"{state.deref(COUNTER)} {state.deref(ACCUMULATOR)}")

    try:
        if settings.demo_cross_check:
            program.verify()
        else:
            program.run_to_completion()
    except CrossCheckError as e:
        console.print(f"[red]cross-check failed:[/red] {e}")
        raise typer.Exit(1) from e

    state = program.get_state()
    logger.info("demo.done steps={}", program.steps)
    console.print(f"Final: {state.deref(ACCUMULATOR)}")


@app.command()
def show(
    counter: Annotated[int | None, typer.Option("--counter", "-n", min=0, max=INT64_MAX, help="Starting value of l1.")] = None,
) -> None:
    """Print the demo program and its type."""
    settings = load_settings(demo_counter=counter)
    program = _demo_program(settings.demo_counter)
    console = Console()
    console.print(f"[bold]store[/bold]: {program.get_state()}")
    console.print(f"[bold]program[/bold]: {program.expression}")
    console.print(f"[bold]type[/bold]: {program.type}")
