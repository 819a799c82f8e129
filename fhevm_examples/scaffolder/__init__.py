"""FHEVM example scaffolder -- generates standalone Hardhat projects.

This module takes a registered example (or category) and copies its Solidity
contract(s) and TypeScript test(s) into a new project directory with a
generated deploy script, ``package.json`` and README.

Quick usage::

    from fhevm_examples.scaffolder import create_example, create_category

    result = create_example("fhe-counter", "./output/my-counter")
    print(result.contract_names)
"""

from fhevm_examples.scaffolder.category import CategoryScaffolder, create_category
from fhevm_examples.scaffolder.example import ExampleScaffolder, create_example
from fhevm_examples.scaffolder.generator import ProjectScaffolder, ScaffoldResult
from fhevm_examples.scaffolder.templates import TemplateRenderer

__all__ = [
    "CategoryScaffolder",
    "ExampleScaffolder",
    "ProjectScaffolder",
    "ScaffoldResult",
    "TemplateRenderer",
    "create_category",
    "create_example",
]
