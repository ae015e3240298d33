#!/usr/bin/env python3
"""Check for forbidden imports in the codebase.

This script enforces architectural boundaries by checking that:
1. Domain layer doesn't import from infrastructure, services, app or interfaces
2. App layer doesn't import from infrastructure persistence
3. Services don't import from interfaces
4. CLI commands don't import persistence adapters directly (except context.py)

Usage:
    python scripts/check_imports.py
    python scripts/check_imports.py --fix-suggestions
"""

from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class ImportViolation:
    """Represents a forbidden import."""

    file_path: Path
    line_number: int
    import_statement: str
    forbidden_module: str
    reason: str


@dataclass
class ImportRule:
    """Defines forbidden imports for a directory."""

    directory: str
    forbidden_patterns: List[str]
    exceptions: List[str] = field(default_factory=list)
    reason: str = ""


# Define architectural rules
IMPORT_RULES: List[ImportRule] = [
    ImportRule(
        directory="ocrsheet/domain",
        forbidden_patterns=[
            "ocrsheet.infrastructure",
            "ocrsheet.services",
            "ocrsheet.app",
            "ocrsheet.interfaces",
        ],
        reason="Domain layer must be independent of the outer layers",
    ),
    ImportRule(
        directory="ocrsheet/app",
        forbidden_patterns=["ocrsheet.infrastructure.persistence"],
        reason="App layer should use services, not persistence directly",
    ),
    ImportRule(
        directory="ocrsheet/services",
        forbidden_patterns=["ocrsheet.interfaces"],
        reason="Services must not depend on interfaces",
    ),
    ImportRule(
        directory="ocrsheet/interfaces/cli",
        forbidden_patterns=["ocrsheet.infrastructure.persistence"],
        exceptions=[
            # Error translation adapter
            "ocrsheet/interfaces/cli/context.py",
        ],
        reason="CLI commands should use services, not persistence directly",
    ),
]


def extract_imports(file_path: Path) -> List[tuple[int, str]]:
    """
    Extract all import statements from a Python file.

    Args:
        file_path (Path): Path to the Python file.

    Returns:
        List[tuple[int, str]]: List of (line number, module name) tuples.
    """
    try:
        content = file_path.read_text(encoding="utf-8")
        tree = ast.parse(content)
    except (SyntaxError, UnicodeDecodeError):
        return []

    imports = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append((node.lineno, alias.name))
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.level == 0:
                imports.append((node.lineno, node.module))
    return imports


def check_file(file_path: Path, rule: ImportRule) -> List[ImportViolation]:
    """
    Check a single file against an import rule.

    Args:
        file_path (Path): Path to the Python file.
        rule (ImportRule): Import rule to check against.

    Returns:
        List[ImportViolation]: List of violations found in the file.
    """
    violations = []

    # Skip exception files
    rel_path = file_path.as_posix()
    if any(exc in rel_path for exc in rule.exceptions):
        return violations

    for line_no, module in extract_imports(file_path):
        for forbidden in rule.forbidden_patterns:
            if module == forbidden or module.startswith(forbidden + "."):
                violations.append(
                    ImportViolation(
                        file_path=file_path,
                        line_number=line_no,
                        import_statement=module,
                        forbidden_module=forbidden,
                        reason=rule.reason,
                    )
                )
    return violations


def check_directory(base_path: Path, rule: ImportRule) -> List[ImportViolation]:
    """
    Check all Python files in a directory against an import rule.

    Args:
        base_path (Path): Base path of the project.
        rule (ImportRule): Import rule to check against.

    Returns:
        List[ImportViolation]: List of violations found in the directory.
    """
    violations = []
    dir_path = base_path / rule.directory

    if not dir_path.exists():
        return violations

    for py_file in dir_path.rglob("*.py"):
        if "__pycache__" in str(py_file):
            continue
        violations.extend(check_file(py_file, rule))

    return violations


def find_violations(base_path: Path) -> List[ImportViolation]:
    """Run every rule against the project rooted at ``base_path``."""
    violations: List[ImportViolation] = []
    for rule in IMPORT_RULES:
        violations.extend(check_directory(base_path, rule))
    return violations


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check for forbidden imports")
    parser.add_argument(
        "--fix-suggestions", action="store_true", help="Show fix suggestions"
    )
    args = parser.parse_args(argv)

    base_path = Path(__file__).parent.parent
    all_violations = find_violations(base_path)

    if not all_violations:
        print("✅ No import violations found!")
        return 0

    print(f"❌ Found {len(all_violations)} import violation(s):\n")

    for v in all_violations:
        print(f"  {v.file_path}:{v.line_number}")
        print(f"    Import: {v.import_statement}")
        print(f"    Reason: {v.reason}")
        if args.fix_suggestions:
            print("    Suggestion: Use a service or move to an adapter file")
        print()

    return 1


if __name__ == "__main__":
    sys.exit(main())
