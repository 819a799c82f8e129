"""Shared pytest fixtures for the FHEVM example generator test suite.

Provides reusable fixtures for:
- A throwaway repository root holding every registered contract and test
- Settings pointing at that root
- A minimal base Hardhat template
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from fhevm_examples.config import Settings
from fhevm_examples.registry import CATEGORIES, EXAMPLES


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------

def solidity_contract(name: str, *, base: str | None = None) -> str:
    """A small but realistic FHEVM contract declaring *name*."""
    inherits = f" is {base}" if base else ""
    return textwrap.dedent(
        f"""\
        // SPDX-License-Identifier: BSD-3-Clause-Clear
        pragma solidity ^0.8.24;

        import {{FHE, euint32, externalEuint32}} from "@fhevm/solidity/lib/FHE.sol";
        import {{SepoliaConfig}} from "@fhevm/solidity/config/ZamaConfig.sol";

        /**
         * @title {name}
         * @notice Demonstrates encrypted arithmetic.
         */
        contract {name}{inherits} {{
            euint32 private _value;

            function add(externalEuint32 input, bytes calldata proof) external {{
                euint32 v = FHE.fromExternal(input, proof);
                _value = FHE.add(_value, v);
                FHE.allowThis(_value);
                FHE.allow(_value, msg.sender);
            }}
        }}
        """
    )


def typescript_test(name: str) -> str:
    return textwrap.dedent(
        f"""\
        import {{ expect }} from "chai";
        import {{ ethers, fhevm }} from "hardhat";

        describe("{name}", function () {{
          it("deploys", async function () {{
            const factory = await ethers.getContractFactory("{name}");
            const contract = await factory.deploy();
            expect(await contract.getAddress()).to.be.properAddress;
          }});
        }});
        """
    )


def _contract_name_for(rel_path: str) -> str:
    return Path(rel_path).stem


# ---------------------------------------------------------------------------
# Repository fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's FHEVM_* variables out of the tests."""
    for var in ("FHEVM_ROOT_DIR", "FHEVM_OUTPUT_ROOT", "FHEVM_BASE_TEMPLATE", "FHEVM_HOMEPAGE_BASE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Repository root with every registry contract and test on disk."""
    root = tmp_path / "repo"
    paths: set[tuple[str, str]] = {(e.contract, e.test) for e in EXAMPLES.values()}
    for category in CATEGORIES.values():
        paths.update((item.path, item.test) for item in category.contracts)

    for contract_rel, test_rel in paths:
        name = _contract_name_for(contract_rel)
        contract = root / contract_rel
        contract.parent.mkdir(parents=True, exist_ok=True)
        contract.write_text(solidity_contract(name, base="SepoliaConfig"), encoding="utf-8")
        test = root / test_rel
        test.parent.mkdir(parents=True, exist_ok=True)
        test.write_text(typescript_test(name), encoding="utf-8")
    yield root


@pytest.fixture
def settings(repo_root: Path) -> Settings:
    return Settings(root_dir=repo_root)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output path that does not exist yet."""
    return tmp_path / "out" / "generated"


@pytest.fixture
def base_template(tmp_path: Path) -> Path:
    """A minimal Hardhat template with build artefacts that must not be copied."""
    template = tmp_path / "fhevm-hardhat-template"
    (template / "contracts").mkdir(parents=True)
    (template / "contracts" / "FHECounter.sol").write_text(
        solidity_contract("FHECounter"), encoding="utf-8"
    )
    (template / "test").mkdir()
    (template / "test" / "FHECounter.ts").write_text(typescript_test("FHECounter"), encoding="utf-8")
    (template / "deploy").mkdir()
    (template / "deploy" / "deploy.ts").write_text("// template deploy\n", encoding="utf-8")
    (template / "node_modules" / "hardhat").mkdir(parents=True)
    (template / "node_modules" / "hardhat" / "index.js").write_text("", encoding="utf-8")
    (template / "tasks").mkdir()
    (template / "tasks" / "accounts.ts").write_text("// accounts task\n", encoding="utf-8")
    (template / "hardhat.config.ts").write_text("export default {};\n", encoding="utf-8")
    (template / "package.json").write_text(
        json.dumps(
            {
                "name": "fhevm-hardhat-template",
                "version": "0.3.0",
                "scripts": {"compile": "hardhat compile", "test": "hardhat test"},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    yield template
