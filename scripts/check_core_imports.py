#!/usr/bin/env python3
"""
Fail if core imports service modules or the shared pydantic models.
Checks all Python files under src/scholarai_client/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "scholarai_client" / "core"

FORBIDDEN_PREFIXES = (
    "scholarai_client.services",
    "scholarai_client.models",
)
FORBIDDEN_RELATIVE = ("services", "models")


def is_forbidden(module: str, level: int = 0) -> bool:
    if level >= 2:
        # `from ..services import x` from inside core
        return module.split(".")[0] in FORBIDDEN_RELATIVE if module else False
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_forbidden(alias.name):
                    errors.append(f"{path}: forbidden import '{alias.name}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if is_forbidden(mod, node.level):
                errors.append(f"{path}: forbidden import '{'.' * node.level}{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
