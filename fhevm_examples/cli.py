"""Command-line entry points.

Three console scripts are installed:

    create-fhevm-example <example-name> [output-dir]
    create-fhevm-category <category> [output-dir]
    generate-fhevm-docs <example-name> [--output PATH] [--no-summary] | --all

Each exits with status 1 and a red error message when the run fails, and with
status 0 otherwise.  Running a command without a name lists what is available.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from rich.table import Table

from .config import Settings
from .docs import generate_all_docs, generate_docs
from .errors import ScaffoldError
from .registry import CATEGORIES, EXAMPLES, example_title
from .scaffolder import ScaffoldResult, create_category, create_example
from .utils import console, print_error, print_header, print_summary_table, print_warning


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Repository root holding contracts/ and test/ (default: $FHEVM_ROOT_DIR or cwd)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List what is available and exit",
    )


def _add_template_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Base Hardhat project copied under the generated files",
    )


def _fail(exc: Exception) -> NoReturn:
    print_error(str(exc))
    sys.exit(1)


def _print_next_steps(result: ScaffoldResult, kind: str, name: str) -> None:
    print_header(f'FHEVM {kind} "{name}" created successfully!', color="green")
    print_summary_table(
        {
            "Output": str(result.output_dir),
            "Contracts": ", ".join(result.contract_names) or "-",
            "Files written": str(len(result.files)),
            "Warnings": str(len(result.warnings)),
        },
        title=f"{kind.capitalize()}: {name}",
    )
    try:
        location = os.path.relpath(result.output_dir)
    except ValueError:
        location = str(result.output_dir)
    console.print("[bold yellow]Next steps:[/bold yellow]")
    console.print(f"  cd {location}")
    console.print("  npm install")
    console.print("  npm run compile")
    console.print("  npm run test")


def _list_examples() -> None:
    table = Table(title="Available examples", header_style="bold cyan")
    table.add_column("Example", style="green", no_wrap=True)
    table.add_column("Title")
    table.add_column("Description")
    for name, example in EXAMPLES.items():
        table.add_row(name, example_title(name), example.description)
    console.print(table)


def _list_categories() -> None:
    table = Table(title="Available categories", header_style="bold cyan")
    table.add_column("Category", style="green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Contracts", justify="right")
    for name, category in CATEGORIES.items():
        table.add_row(name, category.description, str(len(category.contracts)))
    console.print(table)


# ---------------------------------------------------------------------------
# create-fhevm-example
# ---------------------------------------------------------------------------

def example_main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-fhevm-example``."""
    parser = argparse.ArgumentParser(
        prog="create-fhevm-example",
        description="Generate a standalone FHEVM example project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-fhevm-example fhe-counter\n"
            "  create-fhevm-example privacy-compliance-audit ./my-example\n"
        ),
    )
    parser.add_argument("example", nargs="?", help="Registered example name")
    parser.add_argument(
        "output_dir",
        nargs="?",
        type=Path,
        help="Output directory (default: <root>/output/fhevm-example-<name>)",
    )
    _add_common_options(parser)
    _add_template_option(parser)
    args = parser.parse_args(argv)

    if args.list or not args.example:
        _list_examples()
        return

    settings = Settings.from_env(root_dir=args.root, base_template=args.template)
    output_dir = args.output_dir or settings.default_example_output(args.example)
    try:
        result = create_example(args.example, output_dir, settings)
    except ScaffoldError as exc:
        _fail(exc)
    _print_next_steps(result, "example", args.example)


# ---------------------------------------------------------------------------
# create-fhevm-category
# ---------------------------------------------------------------------------

def category_main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-fhevm-category``."""
    parser = argparse.ArgumentParser(
        prog="create-fhevm-category",
        description="Generate an FHEVM project holding every example of a category",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-fhevm-category basic\n"
            "  create-fhevm-category compliance ./output/compliance-examples\n"
        ),
    )
    parser.add_argument("category", nargs="?", help="Registered category name")
    parser.add_argument(
        "output_dir",
        nargs="?",
        type=Path,
        help="Output directory (default: <root>/output/fhevm-category-<name>)",
    )
    _add_common_options(parser)
    _add_template_option(parser)
    args = parser.parse_args(argv)

    if args.list or not args.category:
        _list_categories()
        return

    settings = Settings.from_env(root_dir=args.root, base_template=args.template)
    output_dir = args.output_dir or settings.default_category_output(args.category)
    try:
        result = create_category(args.category, output_dir, settings)
    except ScaffoldError as exc:
        _fail(exc)
    _print_next_steps(result, "category", args.category)


# ---------------------------------------------------------------------------
# generate-fhevm-docs
# ---------------------------------------------------------------------------

def docs_main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``generate-fhevm-docs``."""
    parser = argparse.ArgumentParser(
        prog="generate-fhevm-docs",
        description="Generate GitBook documentation pages from example contracts and tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  generate-fhevm-docs fhe-counter\n"
            "  generate-fhevm-docs fhe-add --output docs/add.md --no-summary\n"
            "  generate-fhevm-docs --all\n"
        ),
    )
    parser.add_argument("example", nargs="?", help="Registered example name")
    parser.add_argument("--output", "-o", default=None, help="Page path (default: docs/<name>.md)")
    parser.add_argument("--no-summary", action="store_true", help="Skip updating SUMMARY.md")
    parser.add_argument("--all", action="store_true", help="Generate docs for every example")
    _add_common_options(parser)
    args = parser.parse_args(argv)

    if args.list or not (args.example or args.all):
        _list_examples()
        return

    settings = Settings.from_env(root_dir=args.root)
    if args.all:
        result = generate_all_docs(settings)
        print_header("All documentation generated", color="green")
        print_summary_table(
            {
                "Pages written": str(len(result.written)),
                "Newly linked": ", ".join(result.summary_added) or "-",
                "Warnings": str(len(result.warnings)),
            }
        )
        if result.warnings and not result.written:
            print_warning("No documentation page could be generated")
            sys.exit(1)
        return

    try:
        page = generate_docs(args.example, settings, output=args.output, summary=not args.no_summary)
    except ScaffoldError as exc:
        _fail(exc)
    print_header("Documentation generated successfully!", color="green")
    console.print(f"Output file: {page}")
