"""Typer CLI entrypoints."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from tinyts.config.settings import load_settings
from tinyts.core.checker import typecheck
from tinyts.core.env import TypeEnv
from tinyts.core.errors import TypeCheckError
from tinyts.core.levels import Level
from tinyts.logging_utils import configure_logging
from tinyts.surface.decode import DecodeError, load_env, load_term, loads_term

app = typer.Typer(name="tinyts", help="Type checker for a tiny TypeScript subset", add_completion=False)
STDIN_NAME = "-"


@app.callback()
def _main() -> None:
    configure_logging(profile="cli")


def _read_term(name: str):
    if name == STDIN_NAME:
        return loads_term(sys.stdin.read(), file="<stdin>")
    return load_term(Path(name).expanduser())


@app.command()
def check(
    files: Annotated[list[str], typer.Argument(help="Term JSON files produced by the parser, '-' for stdin.")],
    level: Annotated[Level | None, typer.Option("--level", "-l", help="Language level to accept.")] = None,
    env_file: Annotated[
        Path | None,
        typer.Option("--env-file", help="JSON object mapping free variable names to types."),
    ] = None,
    hide_term: Annotated[bool, typer.Option("--hide-term", help="Omit the offending term from errors.")] = False,
) -> None:
    """Type check each file and print its type."""

    settings = load_settings(level=level)
    if sys.getrecursionlimit() < settings.recursion_limit:
        sys.setrecursionlimit(settings.recursion_limit)
    show_term = settings.show_term and not hide_term
    out = Console(highlight=False, emoji=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    env = TypeEnv.empty()
    if env_file is not None:
        try:
            env = load_env(env_file.expanduser())
        except (OSError, DecodeError) as e:
            err.print(f"{env_file}: error: {e}", markup=False)
            raise typer.Exit(code=2) from e

    logger.info("check.start files={} level={}", len(files), settings.level.value)
    failed = 0
    for name in files:
        try:
            term = _read_term(name)
            ty = typecheck(term, env, level=settings.level)
        except TypeCheckError as e:
            failed += 1
            err.print(f"{name}: error: {e.describe(show_term=show_term)}", markup=False)
        except (OSError, DecodeError) as e:
            failed += 1
            err.print(f"{name}: error: {e}", markup=False)
        else:
            out.print(f"{name}: {ty}", markup=False)
    logger.info("check.done files={} failed={}", len(files), failed)

    if failed:
        raise typer.Exit(code=1)


@app.command()
def levels() -> None:
    """List the language levels and the term tags each accepts."""

    table = Table(title="Language levels")
    table.add_column("level")
    table.add_column("terms")
    for level in Level:
        tags = sorted(cls.tag for cls in level.terms)
        table.add_row(level.value, ", ".join(tags))
    Console().print(table)


def main() -> None:
    app()
