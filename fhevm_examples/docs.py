"""GitBook documentation generator for the registered examples.

Produces one Markdown page per example with the contract and its test side by
side in GitBook tabs, and keeps ``docs/SUMMARY.md`` (the GitBook table of
contents) in sync.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .config import Settings
from .errors import MissingSourceError, ScaffoldError
from .registry import EXAMPLES, example_title, get_example
from .solidity import extract_description, find_contract_names, read_source
from .utils import ensure_dir, print_info, print_step, print_success, print_warning

SUMMARY_HEADER = "# Summary\n\n## Table of Contents\n"


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class DocsRunResult(BaseModel):
    """Outcome of generating docs for several examples."""

    written: list[Path] = Field(default_factory=list)
    summary_added: list[str] = Field(default_factory=list, description="Examples newly linked")
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Page rendering
# ---------------------------------------------------------------------------

def render_page(
    title: str,
    description: str,
    contract_source: str,
    test_source: str,
    test_file_name: str,
) -> str:
    """Render the GitBook page for one example.

    The contract tab is titled after the declared contract; when the source
    declares none (or several), the first name found is used, else
    ``Contract``.
    """
    names = find_contract_names(contract_source)
    contract_name = names[0] if names else "Contract"
    description = description or extract_description(contract_source)

    lines = [
        f"# {title}",
        "",
        description,
        "",
        '{% hint style="info" %}',
        "To run this example correctly, make sure the files are placed in the following directories:",
        "",
        "- `.sol` file → `<your-project-root-dir>/contracts/`",
        "- `.ts` file → `<your-project-root-dir>/test/`",
        "",
        "This ensures Hardhat can compile and test your contracts as expected.",
        "{% endhint %}",
        "",
        "{% tabs %}",
        "",
        f'{{% tab title="{contract_name}.sol" %}}',
        "",
        "```solidity",
        contract_source.rstrip("\n"),
        "```",
        "",
        "{% endtab %}",
        "",
        f'{{% tab title="{test_file_name}" %}}',
        "",
        "```typescript",
        test_source.rstrip("\n"),
        "```",
        "",
        "{% endtab %}",
        "",
        "{% endtabs %}",
        "",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# SUMMARY.md maintenance
# ---------------------------------------------------------------------------

def add_summary_entry(summary: str, section: str, title: str, file_name: str) -> str | None:
    """Return *summary* with a link to *file_name* under ``## <section>``.

    The link goes after the last list item of the section, nested items
    included, or the section is appended when it does not exist yet.
    Returns ``None`` when the file is already linked.
    """
    if f"]({file_name})" in summary:
        return None

    link = f"- [{title}]({file_name})"
    header = f"## {section}"
    lines = summary.rstrip("\n").split("\n")

    try:
        idx = next(i for i, line in enumerate(lines) if line.strip() == header)
    except StopIteration:
        return "\n".join(lines) + f"\n\n{header}\n\n{link}\n"

    i = idx + 1
    while i < len(lines) and not lines[i].strip():
        i += 1
    if i < len(lines) and lines[i].startswith("- "):
        while i < len(lines) and lines[i].lstrip().startswith("- "):
            i += 1
        lines.insert(i, link)
    else:
        lines[idx + 1:idx + 1] = ["", link]
    return "\n".join(lines) + "\n"


def update_summary(name: str, settings: Settings, page: Path | None = None) -> bool:
    """Link example *name* from ``SUMMARY.md``, creating the file if needed.

    Returns ``True`` when the summary changed.
    """
    example = get_example(name)
    summary_path = settings.summary_path
    if not summary_path.exists():
        print_warning("Creating new SUMMARY.md")
        ensure_dir(summary_path.parent)
        summary_path.write_text(SUMMARY_HEADER, encoding="utf-8")

    file_name = (page or default_page_path(name, settings)).name
    current = summary_path.read_text(encoding="utf-8")
    updated = add_summary_entry(current, example.section, example_title(name), file_name)
    if updated is None:
        print_info(f"{name} already in SUMMARY.md")
        return False

    summary_path.write_text(updated, encoding="utf-8")
    print_success("Updated SUMMARY.md")
    return True


# ---------------------------------------------------------------------------
# Generation entry points
# ---------------------------------------------------------------------------

def default_page_path(name: str, settings: Settings) -> Path:
    return settings.docs_path / f"{name}.md"


def generate_docs(
    name: str,
    settings: Settings | None = None,
    output: str | Path | None = None,
    summary: bool = True,
) -> Path:
    """Write the documentation page for example *name*.

    Args:
        name: Registered example identifier.
        settings: Generator settings; defaults are used when omitted.
        output: Page path.  Relative paths are resolved against the
            repository root.  Defaults to ``<docs_dir>/<name>.md``.
        summary: Whether to link the page from ``SUMMARY.md``.

    Returns:
        Path of the written page.

    Raises:
        UnknownExampleError: *name* is not registered.
        MissingSourceError: The contract or the test file is missing.
        ContractParseError: The contract is not valid UTF-8.
    """
    settings = settings or Settings()
    example = get_example(name)
    title = example_title(name)
    print_info(f"Generating documentation for: {title}")

    print_step(1, "Reading source files...")
    contract_path = settings.resolve(example.contract)
    test_path = settings.resolve(example.test)
    if not contract_path.is_file():
        raise MissingSourceError("contract", example.contract)
    if not test_path.is_file():
        raise MissingSourceError("test", example.test)
    contract_source = read_source(contract_path, example.contract)
    test_source = test_path.read_text(encoding="utf-8")

    print_step(2, "Generating GitBook markdown...")
    description = example.docs_description or example.description
    page = render_page(title, description, contract_source, test_source, test_path.name)

    if output is None:
        page_path = default_page_path(name, settings)
    else:
        page_path = Path(output)
        if not page_path.is_absolute():
            page_path = settings.root_dir / page_path

    print_step(3, "Writing documentation file...")
    ensure_dir(page_path.parent)
    page_path.write_text(page, encoding="utf-8")
    print_success(f"Documentation written to: {page_path}")

    if summary:
        print_step(4, "Updating SUMMARY.md...")
        update_summary(name, settings, page_path)
    return page_path


def generate_all_docs(settings: Settings | None = None) -> DocsRunResult:
    """Generate every example's page, then update ``SUMMARY.md`` once per example.

    A failing example is recorded as a warning and does not stop the run;
    examples whose page could not be written are not linked.
    """
    settings = settings or Settings()
    result = DocsRunResult()
    names = list(EXAMPLES)

    for index, name in enumerate(names, start=1):
        print_info(f"[{index}/{len(names)}] Processing: {name}")
        try:
            result.written.append(generate_docs(name, settings, summary=False))
        except ScaffoldError as exc:
            message = f"Failed to generate docs for {name}: {exc}"
            result.warnings.append(message)
            print_warning(message)

    written = {path.name for path in result.written}
    for name in names:
        if default_page_path(name, settings).name in written and update_summary(name, settings):
            result.summary_added.append(name)
    return result
