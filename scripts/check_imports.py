#!/usr/bin/env python3
"""Check hexagonal import boundaries of the votebox package.

Layering rules:
- domain/: pure governance rules, imports no other votebox layer
- application/: services and ports, imports domain/ only
- infrastructure/: adapters, imports domain/ and application/
- bootstrap/: composition root, imports any layer

Packages outside these layers (config) are shared and not checked.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE_NAME = "votebox"

# Lower number = inner layer; inner layers cannot import outer ones
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "application": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "application", "infrastructure"},
}


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Module named by an import statement (first name for ``import a, b``)."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if isinstance(node, ast.Import) and node.names:
        return node.names[0].name
    return None


def file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Layer a file belongs to, or None outside the layered packages."""
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if not parts or parts[0] not in LAYER_HIERARCHY:
        return None
    return parts[0]


def import_violation(module: str, layer: str) -> str | None:
    """Describe the violation of importing ``module`` from ``layer``, if any."""
    parts = module.split(".")
    if parts[0] != PACKAGE_NAME or len(parts) < 2:
        return None

    target = parts[1]
    if target not in LAYER_HIERARCHY or target == layer:
        return None
    if target not in ALLOWED_IMPORTS[layer]:
        return f"{layer} layer cannot import from {target}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[tuple[str, int, str]]:
    """Check one file.

    Returns:
        List of (file_path, line_number, violation_message) tuples.
    """
    layer = file_layer(py_file, package_dir)
    if layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[tuple[str, int, str]] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        module = get_import_module(node)
        if module is None:
            continue
        message = import_violation(module, layer)
        if message:
            violations.append((str(py_file), node.lineno, message))
    return violations


def check_import_boundaries(package_dir: Path) -> list[tuple[str, int, str]]:
    """Check every module under the package directory."""
    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[tuple[str, int, str]] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[tuple[str, int, str]]) -> str:
    if not violations:
        return ""
    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
