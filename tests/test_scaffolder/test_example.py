"""Tests for the single-example scaffolder.

Covers:
- Generated tree for every registered example
- Contract file named after the parsed contract
- Failures: unknown name, existing output, missing sources, unparseable contract
- No output directory left behind by a failed validation
- package.json / deploy script / README content
- Base template cloning and package.json merge
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fhevm_examples.config import Settings
from fhevm_examples.errors import (
    ContractParseError,
    InvalidTemplateError,
    MissingSourceError,
    OutputExistsError,
    UnknownExampleError,
)
from fhevm_examples.registry import EXAMPLES
from fhevm_examples.scaffolder import ExampleScaffolder, create_example
from fhevm_examples.solidity import read_contract_name

pytestmark = pytest.mark.unit


class TestGeneratedTree:
    @pytest.mark.parametrize("name", sorted(EXAMPLES))
    def test_one_contract_one_test(self, name: str, settings: Settings, output_dir: Path):
        result = create_example(name, output_dir, settings)

        sol_files = list((output_dir / "contracts").iterdir())
        test_files = list((output_dir / "test").iterdir())
        assert len(sol_files) == 1
        assert len(test_files) == 1

        expected = read_contract_name(settings.resolve(EXAMPLES[name].contract))
        assert sol_files[0].name == f"{expected}.sol"
        assert result.contract_names == [expected]
        assert test_files[0].name == Path(EXAMPLES[name].test).name

    def test_files_listed_in_result(self, settings: Settings, output_dir: Path):
        result = create_example("fhe-add", output_dir, settings)
        assert result.output_dir == output_dir
        assert result.relative_files() == [
            "contracts/FHEAdd.sol",
            "test/FHEAdd.test.ts",
            "deploy/deploy.ts",
            "package.json",
            "README.md",
        ]
        assert result.warnings == []

    def test_contract_copied_verbatim(self, settings: Settings, output_dir: Path):
        create_example("fhe-eq", output_dir, settings)
        original = settings.resolve("contracts/FHEEq.sol").read_text(encoding="utf-8")
        assert (output_dir / "contracts" / "FHEEq.sol").read_text(encoding="utf-8") == original

    def test_contract_renamed_after_declaration(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "contracts" / "FHEAdd.sol").write_text(
            "pragma solidity ^0.8.24;\ncontract EncryptedAdder {\n}\n", encoding="utf-8"
        )
        create_example("fhe-add", output_dir, settings)
        assert [p.name for p in (output_dir / "contracts").iterdir()] == ["EncryptedAdder.sol"]


class TestGeneratedFiles:
    def test_package_json(self, settings: Settings, output_dir: Path):
        create_example("fhe-counter", output_dir, settings)
        package = json.loads((output_dir / "package.json").read_text(encoding="utf-8"))
        assert package["name"] == "fhevm-example-fhe-counter"
        assert package["description"] == EXAMPLES["fhe-counter"].description
        assert package["version"] == "1.0.0"
        assert package["homepage"] == "https://github.com/fhevm-examples/fhe-counter"

    def test_deploy_script(self, settings: Settings, output_dir: Path):
        create_example("privacy-compliance-audit", output_dir, settings)
        deploy = (output_dir / "deploy" / "deploy.ts").read_text(encoding="utf-8")
        assert 'await deploy("PrivacyComplianceAudit", {' in deploy
        assert 'func.id = "deploy_privacycomplianceaudit";' in deploy
        assert 'func.tags = ["PrivacyComplianceAudit"];' in deploy

    def test_readme(self, settings: Settings, output_dir: Path):
        create_example("fhe-eq", output_dir, settings)
        readme = (output_dir / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# FHEVM Example: fhe-eq")
        assert EXAMPLES["fhe-eq"].description in readme
        assert "`contracts/FHEEq.sol`" in readme


class TestFailures:
    def test_unknown_example_creates_nothing(self, settings: Settings, output_dir: Path):
        with pytest.raises(UnknownExampleError):
            create_example("fhe-mul", output_dir, settings)
        assert not output_dir.exists()

    def test_existing_output_untouched(self, settings: Settings, output_dir: Path):
        output_dir.mkdir(parents=True)
        marker = output_dir / "keep.txt"
        marker.write_text("mine", encoding="utf-8")

        with pytest.raises(OutputExistsError) as exc_info:
            create_example("fhe-add", output_dir, settings)

        assert exc_info.value.path == output_dir
        assert [p.name for p in output_dir.iterdir()] == ["keep.txt"]
        assert marker.read_text(encoding="utf-8") == "mine"

    def test_missing_contract(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "contracts" / "FHEAdd.sol").unlink()
        with pytest.raises(MissingSourceError) as exc_info:
            create_example("fhe-add", output_dir, settings)
        assert exc_info.value.relative_path == "contracts/FHEAdd.sol"
        assert str(exc_info.value) == "Contract not found: contracts/FHEAdd.sol"
        assert not output_dir.exists()

    def test_missing_test(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "test" / "FHEAdd.test.ts").unlink()
        with pytest.raises(MissingSourceError, match="Test not found: test/FHEAdd.test.ts"):
            create_example("fhe-add", output_dir, settings)
        assert not output_dir.exists()

    def test_unparseable_contract(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "contracts" / "FHEAdd.sol").write_text("library Only {}\n", encoding="utf-8")
        with pytest.raises(ContractParseError):
            create_example("fhe-add", output_dir, settings)
        assert not output_dir.exists()

    def test_two_contracts_rejected(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "contracts" / "FHEAdd.sol").write_text(
            "contract A {}\ncontract B {}\n", encoding="utf-8"
        )
        with pytest.raises(ContractParseError, match="declares 2 contracts"):
            create_example("fhe-add", output_dir, settings)
        assert not output_dir.exists()

    def test_missing_base_template(self, repo_root: Path, tmp_path: Path, output_dir: Path):
        settings = Settings(root_dir=repo_root, base_template=tmp_path / "absent")
        with pytest.raises(MissingSourceError, match="Base template not found"):
            create_example("fhe-add", output_dir, settings)
        assert not output_dir.exists()

    @pytest.mark.parametrize("content", ["{ not json", "[1, 2]"])
    def test_invalid_template_package_json(
        self, repo_root: Path, base_template: Path, output_dir: Path, content: str
    ):
        (base_template / "package.json").write_text(content, encoding="utf-8")
        settings = Settings(root_dir=repo_root, base_template=base_template)
        with pytest.raises(InvalidTemplateError) as exc_info:
            create_example("fhe-add", output_dir, settings)
        assert exc_info.value.path == base_template / "package.json"
        assert not output_dir.exists()

    def test_non_utf8_contract(self, settings: Settings, repo_root: Path, output_dir: Path):
        (repo_root / "contracts" / "FHEAdd.sol").write_bytes(b"contract FHEAdd {\xff}\n")
        with pytest.raises(ContractParseError, match="contracts/FHEAdd.sol is not valid UTF-8"):
            create_example("fhe-add", output_dir, settings)
        assert not output_dir.exists()


class TestBaseTemplate:
    def test_template_files_cloned(self, repo_root: Path, base_template: Path, output_dir: Path):
        settings = Settings(root_dir=repo_root, base_template=base_template)
        ExampleScaffolder(settings).create("fhe-add", output_dir)

        assert (output_dir / "hardhat.config.ts").exists()
        assert (output_dir / "tasks" / "accounts.ts").exists()
        assert not (output_dir / "node_modules").exists()

    def test_template_sources_replaced(self, repo_root: Path, base_template: Path, output_dir: Path):
        settings = Settings(root_dir=repo_root, base_template=base_template)
        create_example("fhe-add", output_dir, settings)

        assert [p.name for p in (output_dir / "contracts").iterdir()] == ["FHEAdd.sol"]
        assert [p.name for p in (output_dir / "test").iterdir()] == ["FHEAdd.test.ts"]
        assert "template deploy" not in (output_dir / "deploy" / "deploy.ts").read_text(encoding="utf-8")

    def test_template_package_json_merged(self, repo_root: Path, base_template: Path, output_dir: Path):
        settings = Settings(root_dir=repo_root, base_template=base_template)
        result = create_example("fhe-add", output_dir, settings)

        package = json.loads((output_dir / "package.json").read_text(encoding="utf-8"))
        assert package["name"] == "fhevm-example-fhe-add"
        assert package["version"] == "0.3.0"
        assert package["scripts"]["test"] == "hardhat test"
        assert result.relative_files().count("package.json") == 1
