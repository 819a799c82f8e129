"""Scaffold a standalone project for one registered example."""

from __future__ import annotations

from pathlib import Path

from ..config import Settings
from ..registry import get_example
from ..solidity import read_contract_name
from ..utils import print_info, print_step, print_success
from .generator import ProjectScaffolder, ScaffoldResult


class ExampleScaffolder(ProjectScaffolder):
    """Copies one contract and its test into a new Hardhat project.

    The generated tree is::

        <output>/contracts/<ContractName>.sol
        <output>/test/<test file>
        <output>/deploy/deploy.ts
        <output>/package.json
        <output>/README.md
    """

    package_prefix = "fhevm-example"

    def create(self, name: str, output_dir: str | Path) -> ScaffoldResult:
        """Generate the project for example *name* in *output_dir*.

        Every check runs before the output directory is created, so a
        failure leaves the filesystem untouched.

        Raises:
            UnknownExampleError: *name* is not in the registry.
            OutputExistsError: *output_dir* already exists.
            MissingSourceError: The contract, test or base template is missing.
            InvalidTemplateError: The base template's package.json is not a JSON object.
            ContractParseError: The contract does not declare exactly one
                concrete contract.
        """
        example = get_example(name)
        output = Path(output_dir)
        self._check_output_free(output)
        contract_path = self._require_source("contract", example.contract)
        test_path = self._require_source("test", example.test)
        self._check_template()
        contract_name = read_contract_name(contract_path, example.contract)

        print_info(f"Creating FHEVM example: {name}")
        print_info(f"Output directory: {output}")
        result = ScaffoldResult(output_dir=output, contract_names=[contract_name])

        print_step(1, "Creating project structure...")
        self._create_output(output, result)
        print_success("Project structure created")

        print_step(2, "Copying contract...")
        self._copy_into(contract_path, output, "contracts", result, f"{contract_name}.sol")
        print_success(f"Contract copied: {contract_name}.sol")

        print_step(3, "Copying test...")
        self._copy_into(test_path, output, "test", result)
        print_success(f"Test copied: {test_path.name}")

        print_step(4, "Updating configuration...")
        self._write_deploy_script(output, [contract_name], contract_name.lower(), result)
        self._write_package_json(output, name, example.description, result)
        print_success("Configuration updated")

        print_step(5, "Generating README...")
        self._write_readme(
            output,
            "example_README.md.j2",
            {
                "example_name": name,
                "description": example.description,
                "contract_name": contract_name,
            },
            result,
        )
        print_success("README.md generated")
        return result


def create_example(
    name: str, output_dir: str | Path, settings: Settings | None = None
) -> ScaffoldResult:
    """Convenience wrapper around :meth:`ExampleScaffolder.create`."""
    return ExampleScaffolder(settings).create(name, output_dir)
