"""Terminal output helpers for the CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

_out = Console(highlight=False, emoji=False, soft_wrap=True)
_err = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print(text: str) -> None:  # noqa: A001
    # model text contains C# attributes like [Key]; never parse it as markup
    _out.print(text, markup=False)


def header(text: str) -> None:
    _out.print(f"[bold]{escape(text)}[/bold]")


def subheader(text: str) -> None:
    _out.print(f"[bold cyan]{escape(text)}[/bold cyan]")


def key_value(key: str, value: Any, indent: int = 0) -> None:
    _out.print(f"{' ' * indent}[dim]{escape(key)}:[/dim] {escape(str(value))}")


def dim(text: str) -> None:
    _out.print(f"[dim]{escape(text)}[/dim]")


def success(text: str) -> None:
    _out.print(f"[green]{escape(text)}[/green]")


def error(text: str) -> None:
    _err.print(f"[red]error:[/red] {escape(text)}")
