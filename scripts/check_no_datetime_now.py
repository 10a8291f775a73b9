#!/usr/bin/env python3
"""Reject direct datetime.now()/utcnow() calls in the votebox package.

Services take "now" from an injected TimeAuthorityProtocol so proxy
validity windows and vote timestamps stay deterministic under test.
Only the system clock adapter reads the host clock.

Usage:
    python scripts/check_no_datetime_now.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""

import re
import sys
from pathlib import Path

DATETIME_NOW_PATTERN = re.compile(r"datetime\s*\.\s*(now|utcnow)\s*\(")

# Paths relative to the package directory that may read the clock
ALLOWED_FILES = {
    "infrastructure/adapters/system_time_authority.py",
}


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Return (line_number, line) pairs with direct clock reads."""
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    violations: list[tuple[int, str]] = []
    for line_num, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append((line_num, line.strip()))
    return violations


def find_violations(package_dir: Path) -> dict[str, list[tuple[int, str]]]:
    found: dict[str, list[tuple[int, str]]] = {}
    for py_file in sorted(package_dir.rglob("*.py")):
        relative = py_file.relative_to(package_dir).as_posix()
        if relative in ALLOWED_FILES:
            continue
        violations = check_file(py_file)
        if violations:
            found[relative] = violations
    return found


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / "votebox"

    if not package_dir.exists():
        print(f"Warning: {package_dir} not found, skipping check")
        return 0

    found = find_violations(package_dir)
    if not found:
        print("No datetime.now() calls found.")
        return 0

    print("Direct datetime.now() calls detected; inject TimeAuthorityProtocol instead:")
    for file_path, violations in found.items():
        print(f"  {file_path}:")
        for line_num, line_content in violations:
            print(f"    Line {line_num}: {line_content}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
