"""Scaffold one project holding every contract of a category.

Unlike the single-example scaffolder, problems with individual contract items
are not fatal: a missing file, an unparseable contract or a duplicate contract
name is reported as a warning and that item (or file) is skipped.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from ..config import Settings
from ..errors import ContractParseError
from ..registry import ContractItem, get_category
from ..solidity import read_contract_name
from ..utils import console, print_info, print_step, print_success, print_warning
from .generator import ProjectScaffolder, ScaffoldResult


class CategoryScaffolder(ProjectScaffolder):
    """Copies all contracts, tests and fixtures of a category into one project."""

    package_prefix = "fhevm-category"

    def create(self, category_name: str, output_dir: str | Path) -> ScaffoldResult:
        """Generate the project for *category_name* in *output_dir*.

        Raises:
            UnknownCategoryError: *category_name* is not in the registry.
            OutputExistsError: *output_dir* already exists.
            MissingSourceError: A base template is configured but missing.
            InvalidTemplateError: The base template's package.json is not a JSON object.
        """
        category = get_category(category_name)
        output = Path(output_dir)
        self._check_output_free(output)
        self._check_template()

        print_info(f"Creating FHEVM category: {category_name}")
        print_info(f"Output directory: {output}")
        result = ScaffoldResult(output_dir=output)

        print_step(1, "Creating project structure...")
        self._create_output(output, result)
        print_success("Project structure created")

        print_step(2, "Copying contracts and tests...")
        for item in category.contracts:
            self._copy_item(item, output, result)
        count = len(result.contract_names)
        if count:
            print_success(f"Copied {count} contracts and tests")
        else:
            print_warning("No contracts were copied")

        print_step(3, "Updating configuration...")
        self._write_deploy_script(output, result.contract_names, f"category_{category_name}", result)
        self._write_package_json(output, category_name, category.description, result)
        print_success("Configuration updated")

        print_step(4, "Generating README...")
        self._write_readme(
            output,
            "category_README.md.j2",
            {
                "category_title": category.name,
                "description": category.description,
                "contract_names": result.contract_names,
            },
            result,
        )
        print_success("README.md generated")
        return result

    def _copy_item(self, item: ContractItem, output: Path, result: ScaffoldResult) -> None:
        contract_path = self.settings.resolve(item.path)
        if not contract_path.is_file():
            self._warn(result, f"Contract not found: {item.path}")
            return

        try:
            contract_name = read_contract_name(contract_path, item.path)
        except ContractParseError as exc:
            self._warn(result, str(exc))
            return

        if contract_name in result.contract_names:
            self._warn(result, f"Duplicate contract {contract_name} in {item.path}; skipped")
            return

        result.contract_names.append(contract_name)
        self._copy_into(contract_path, output, "contracts", result, f"{contract_name}.sol")
        console.print(f"  [green]Copied contract:[/green] {contract_name}.sol")

        support = [("test", item.test)]
        if item.fixture:
            support.append(("fixture", item.fixture))
        support.extend(("additional file", rel) for rel in item.additional_files)

        for kind, rel in support:
            source = self.settings.resolve(rel)
            if not source.is_file():
                self._warn(result, f"{kind.capitalize()} not found: {rel}")
                continue
            self._copy_into(source, output, "test", result)
            console.print(f"  [green]Copied {kind}:[/green] {escape(source.name)}")


def create_category(
    category_name: str, output_dir: str | Path, settings: Settings | None = None
) -> ScaffoldResult:
    """Convenience wrapper around :meth:`CategoryScaffolder.create`."""
    return CategoryScaffolder(settings).create(category_name, output_dir)
