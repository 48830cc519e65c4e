"""Tests for the developer scripts."""

from pathlib import Path

import pyoresult as pr
from scripts import check_docstrings, check_fn_rust


class TestCheckDocstrings:
    """Code fence checks."""

    def test_closed_blocks(self) -> None:
        """Test a docstring with balanced fences passes."""
        doc = "Summary.\n\n```python\n>>> 1\n1\n\n```\n"
        assert check_docstrings.check_code_blocks(doc, 10) == pr.Ok(None)

    def test_unclosed_block(self) -> None:
        """Test an unclosed fence is reported with its language."""
        res = check_docstrings.check_code_blocks("Summary.\n```python\n>>> 1\n", 10)
        assert res.is_err()
        assert [e.message for e in res.error] == ["Unclosed ```python block"]

    def test_package_docstrings(self) -> None:
        """Test the package itself has no docstring issues."""
        src = Path(pr.__file__).parent
        errors = [e for path in src.rglob("*.py") for e in check_docstrings.check_file(path)]
        assert errors == []


def test_missing_rust_fns() -> None:
    """Test that only the functions missing on one side are reported."""
    frame = check_fn_rust.missing_fns(
        pr.Result, {"map", "and", "expect"}, check_fn_rust._filters()
    ).collect()
    rows = set(frame.iter_rows())
    assert ("rust", "expect") in rows
    assert ("python", "map_err") in rows
    assert all(fn not in {"map", "and", "and_", "into"} for _, fn in rows)
