"""Shared utility functions for the FHEVM example generators.

Provides Rich-based terminal reporting, JSON I/O and file-system helpers used
by the scaffolders and the docs generator.  Output goes through a single
module-level ``console`` so that every command prints in the same style.
"""

from __future__ import annotations

import json
import re
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Convert an arbitrary identifier to a safe package/directory name.

    * Lowercases the input.
    * Replaces spaces and non-alphanumeric characters (except hyphens and
      underscores) with hyphens.
    * Collapses consecutive hyphens and strips leading/trailing hyphens.

    Examples::

        sanitize_name("FHE Counter") -> "fhe-counter"
        sanitize_name("  Basic (v2)  ") -> "basic-v2"
    """
    result = re.sub(r"[^a-zA-Z0-9_-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


def title_from_identifier(identifier: str) -> str:
    """Turn ``fhe-counter`` into ``Fhe Counter`` for display purposes."""
    return " ".join(part.capitalize() for part in re.split(r"[-_\s]+", identifier) if part)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that holds a top-level object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as 2-space indented JSON with a trailing newline.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def copy_file(source: Path, destination: Path) -> Path:
    """Copy *source* to *destination*, creating parent directories."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    return destination


def copy_tree(
    source: Path,
    destination: Path,
    *,
    exclude: Iterable[str] = (),
    exclude_top_level: Iterable[str] = (),
) -> list[Path]:
    """Recursively copy *source* into *destination*.

    Args:
        source: Directory to copy from.
        destination: Directory to copy into.  Created if missing; existing
            files with the same relative path are overwritten.
        exclude: Directory names skipped at any depth (``node_modules`` etc).
        exclude_top_level: Directory names skipped only directly under
            *source*.  They are still created, empty, in *destination*.

    Returns:
        Every file written, in sorted traversal order.
    """
    skip_anywhere = set(exclude)
    skip_top = set(exclude_top_level)
    written: list[Path] = []

    def _walk(src_dir: Path, dst_dir: Path, top: bool) -> None:
        dst_dir.mkdir(parents=True, exist_ok=True)
        for item in sorted(src_dir.iterdir()):
            target = dst_dir / item.name
            if item.is_dir():
                if item.name in skip_anywhere:
                    continue
                if top and item.name in skip_top:
                    target.mkdir(parents=True, exist_ok=True)
                    continue
                _walk(item, target, top=False)
            else:
                shutil.copyfile(item, target)
                written.append(target)

    _walk(Path(source), Path(destination), top=True)
    return written


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_step(number: int, message: str) -> None:
    """Print a numbered step heading (``Step 2: Copying contract...``)."""
    console.print(f"\n[bold cyan]Step {number}:[/bold cyan] {escape(message)}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
