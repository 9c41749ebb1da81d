"""
TUI (Text User Interface) utilities for clrsKit using Rich library.

Provides styled console output, tables and progress bars for the CLI.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.theme import Theme


# ==== CLRSKIT CUSTOM THEME ==== #

custom_theme = Theme({
    "info": "bold bright_white",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "debug": "grey70",
    "highlight": "bold blue",
    "detail": "grey74",
    "progress": "cyan",
    "data": "bright_cyan",
    "input": "magenta",
    "output": "bold green",
})

console = Console(theme=custom_theme)


# ==== CORE TUI PRINT FUNCTIONS ==== #

def tui_print_info(message: str, style: str = "info") -> None:
    """Prints an informational message with the specified style.

    Args:
        message: The message string to print.
        style: The Rich style to apply (defaults to "info").
    """
    console.print(f"[{style}]{message}[/]")


def tui_print_success(message: str, style: str = "success") -> None:
    """Prints a success message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def tui_print_warning(message: str, style: str = "warning") -> None:
    """Prints a warning message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def tui_print_error(message: str, style: str = "error") -> None:
    """Prints an error message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def tui_print_debug(message: str, style: str = "debug") -> None:
    """Prints a debug message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def tui_print_highlight(message: str, style: str = "highlight") -> None:
    """Prints a highlighted message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def tui_print_detail(message: str, style: str = "detail") -> None:
    """Prints a detail message with the specified style."""
    console.print(f"[{style}]{message}[/]")


def format_values(values: Sequence[Any], limit: int = 40) -> str:
    """Render a sequence compactly, eliding the middle of long ones.

    Args:
        values: The values to render.
        limit: Maximum number of values shown before eliding.

    Returns:
        str: Bracketed, comma-separated values, e.g. "[1, 2, … 9] (n=120)".
    """
    items = list(values)
    if len(items) <= limit:
        return "[" + ", ".join(str(v) for v in items) + "]"
    head = ", ".join(str(v) for v in items[: limit // 2])
    tail = ", ".join(str(v) for v in items[-(limit // 2):])
    return f"[{head}, … {tail}] (n={len(items)})"


def tui_print_values(label: str, values: Sequence[Any], style: str = "data") -> None:
    """Prints a labelled sequence of values, e.g. the input or output of a sort.

    Args:
        label: Label printed before the values.
        values: The values to print.
        style: The Rich style for the values.
    """
    console.print(f"[detail]{escape(label)}:[/] [{style}]{escape(format_values(values))}[/]", highlight=False)


def tui_print_json(data: Any) -> None:
    """Prints JSON data with syntax highlighting.

    Handles both stringified JSON and serializable Python objects.

    Args:
        data: The JSON data (can be a string or a serializable Python object).
    """
    if isinstance(data, str):
        json_str_data = data
    else:
        try:
            json_str_data = json.dumps(data, indent=2, ensure_ascii=False)
        except TypeError as e:
            tui_print_error(f"Failed to serialize data to JSON: {e}")
            console.print(str(data))  # Fallback to printing raw data
            return

    # soft-wrapped so the output stays machine-readable
    console.print_json(json_str_data)


def tui_print_table(
    data: List[Dict[str, Any]],
    title: Optional[str] = None,
    style_columns: Optional[Dict[str, str]] = None,
) -> None:
    """Prints data in a formatted table using Rich.

    Auto-styles columns based on common keywords (e.g., "name", "n")
    and data types.

    Args:
        data: A list of dictionaries, where each dictionary represents a row.
              All dictionaries should ideally have the same keys.
        title: Optional title for the table.
        style_columns: Optional dictionary mapping column names to specific
                       Rich styles to override default styling.
    """
    if not data:
        warning_msg = "No data to display in table"
        if title:
            warning_msg += f" for '{title}'"
        tui_print_warning(warning_msg)
        return

    table = Table(title=title, box=box.ROUNDED, show_lines=False, expand=False)
    headers = list(data[0].keys())

    for key in headers:
        column_style: str = "data"
        header_style: str = "bold data"
        justify_rule: str = "left"

        if style_columns and key in style_columns:
            column_style = style_columns[key]
            header_style = f"bold {style_columns[key]}"
        elif key.lower() in ("name", "algorithm"):
            column_style = "highlight"
            header_style = "bold highlight"
        elif isinstance(data[0].get(key), bool):
            justify_rule = "center"
        elif isinstance(data[0].get(key), (int, float)):
            justify_rule = "right"

        table.add_column(
            key,
            style=column_style,
            header_style=header_style,
            justify=justify_rule,
            overflow="fold",
        )

    for item in data:
        table.add_row(*[_cell(item.get(header, "")) for header in headers])

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


# ==== PROCESS STATUS INDICATORS ==== #

def tui_starting_process(process_name: str) -> None:
    """Prints a message indicating a process is starting."""
    tui_print_info(f"Starting: {process_name}...")


def tui_process_complete(process_name: str, status: str = "Completed") -> None:
    """Prints a message indicating a process has completed successfully."""
    tui_print_success(f"{status}: {process_name}")


def tui_process_failed(process_name: str, reason: Optional[str] = None) -> None:
    """Prints a message indicating a process has failed.

    Args:
        process_name: The name of the process that failed.
        reason: Optional string explaining the reason for failure.
    """
    message = f"Failed: {process_name}"
    if reason:
        message += f" - Reason: {reason}"
    tui_print_error(message)


def tui_progress_bar(description: str = "Processing...") -> Progress:
    """Creates and returns a pre-configured Rich Progress bar instance.

    The progress bar is transient (disappears on completion).

    Args:
        description: A description of the task being tracked.

    Returns:
        A Rich Progress instance, ready to be used in a `with` statement.
    """
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("({task.completed:.0f}/{task.total:.0f})"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=True,
    )
