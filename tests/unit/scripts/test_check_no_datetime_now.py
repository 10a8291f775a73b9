"""Unit tests for the direct clock read check."""

import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "scripts"))

from check_no_datetime_now import check_file, find_violations

PACKAGE_DIR = Path(__file__).parent.parent.parent.parent / "votebox"


def test_detects_direct_clock_reads() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        source = Path(tmp) / "service.py"
        source.write_text(
            "from datetime import datetime\n"
            "# datetime.now() in a comment is fine\n"
            "stamp = datetime.now()\n"
        )

        assert check_file(source) == [(3, "stamp = datetime.now()")]


def test_system_clock_adapter_is_the_only_reader() -> None:
    assert find_violations(PACKAGE_DIR) == {}
