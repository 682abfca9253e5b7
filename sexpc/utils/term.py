from typing import Iterable
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from .colors import Colors, is_minimal

console = Console()
err_console = Console(stderr=True)


def print_stage(step: int, total: int, message: str):
    """Print a staged progress line (e.g. 1/3 Parsing...)"""
    if not getattr(Colors, 'VERBOSE', False):
        return
    if is_minimal():
        err_console.print(f"[{step}/{total}] {escape(message)}", markup=False)
    else:
        err_console.print(f"[cyan]●[/cyan] [bold]{step}/{total}[/bold] {escape(message)}")


def print_info(message: str):
    if not getattr(Colors, 'VERBOSE', False):
        return
    if is_minimal():
        err_console.print(f"Info: {message}", markup=False)
        return
    err_console.print(f"[yellow]Info:[/yellow] {escape(message)}")


def print_error(message: str):
    # diagnostics always read 'Error: <message>'
    if is_minimal():
        err_console.print(f"Error: {message}", markup=False, highlight=False, soft_wrap=True)
        return
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)


def print_warning(message: str):
    if is_minimal():
        err_console.print(f"Warning: {message}", markup=False, highlight=False, soft_wrap=True)
        return
    err_console.print(f"[#9b59b6]Warning:[/#9b59b6] {escape(message)}", highlight=False, soft_wrap=True)


def print_success(message: str):
    if not getattr(Colors, 'VERBOSE', False):
        return
    if is_minimal():
        err_console.print(f"OK: {message}", markup=False)
        return
    err_console.print(f"[green]Success:[/green] {escape(message)}")


def print_prompt(prompt: str):
    err_console.print(prompt, end='', markup=False, highlight=False, soft_wrap=True)


def print_symbols(symbols: Iterable, title: str = "Symbols"):
    """Render environment bindings as a table on stdout"""
    if is_minimal():
        for sym in symbols:
            console.print(f"{sym.name} = {sym.value}", markup=False, highlight=False, soft_wrap=True)
        return
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    table.add_column("Bound at", style="dim")
    for sym in symbols:
        table.add_row(escape(sym.name), escape(str(sym.value)), str(sym.location or ''))
    console.print(table)
