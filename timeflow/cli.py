#!filepath: timeflow/cli.py
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from timeflow import __version__
from timeflow.config import AppConfig
from timeflow.core import ReplayClock, Source
from timeflow.runtime import build_runtime

app = typer.Typer(help="timeflow: sample Events and Behaviours over time")
console = Console()


def parse_occurrence(text: str) -> tuple[int, int]:
    """'<time>:<int value>' -> (time, value)"""
    time_part, sep, value_part = text.partition(":")
    if not sep:
        raise typer.BadParameter(f"expected <time>:<value>, got {text!r}")
    try:
        return int(time_part), int(value_part)
    except ValueError:
        raise typer.BadParameter(f"time and value must be integers: {text!r}")


@app.command()
def version():
    console.print(f"v{__version__}")


@app.command()
def sample(
    occurrences: List[str] = typer.Argument(..., help="<time>:<value> pairs, any order"),
    start: int = typer.Option(0, help="first sampling tick"),
    end: int = typer.Option(10, help="last sampling tick (inclusive)"),
    step: int = typer.Option(1, min=1, help="tick spacing"),
    initial: int = typer.Option(0, help="Stepper / Accumulator initial value"),
    config: Optional[str] = typer.Option(None, help="YAML config path"),
):
    """
    Feed a Source and print Stepper / running-sum Accumulator per tick.
    """
    build_runtime(AppConfig.load(config))

    source = Source()
    for text in occurrences:
        t, v = parse_occurrence(text)
        source.add(v, t)

    latest = source.stepper(initial)
    total = source.accumulate(initial, lambda acc, v: acc + v)

    table = Table(title=f"{len(source.occurrences())} occurrences")
    table.add_column("t", justify="right")
    table.add_column("stepper", justify="right")
    table.add_column("accumulator", justify="right")

    for t in ReplayClock(start, end, step):
        table.add_row(str(t), str(latest.at(t)), str(total.at(t)))

    console.print(table)


if __name__ == "__main__":
    app()
