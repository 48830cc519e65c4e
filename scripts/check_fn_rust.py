"""Check which Rust Option/Result functions have a Python equivalent."""

from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

import polars as pl

import pyoresult as pr

DATA = Path("scripts", "data")

OPTION_FN = {
    "and",
    "and_then",
    "expect",
    "filter",
    "flatten",
    "get_or_insert_with",
    "inspect",
    "insert",
    "is_none",
    "is_some",
    "is_some_and",
    "iter",
    "map",
    "map_or",
    "map_or_else",
    "ok_or",
    "ok_or_else",
    "or",
    "or_else",
    "replace",
    "take",
    "unwrap",
    "unwrap_or",
    "unwrap_or_default",
    "unwrap_or_else",
    "xor",
    "zip",
}

RESULT_FN = {
    "and",
    "and_then",
    "err",
    "expect",
    "expect_err",
    "flatten",
    "inspect",
    "inspect_err",
    "is_err",
    "is_err_and",
    "is_ok",
    "is_ok_and",
    "iter",
    "map",
    "map_err",
    "map_or",
    "map_or_else",
    "ok",
    "or",
    "or_else",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_default",
    "unwrap_or_else",
}


def _filters() -> frozenset[str]:
    pure_rust = frozenset(
        {"as_ref", "as_mut", "copied", "cloned", "get_or_insert_with", "insert", "replace", "take"}
    )
    """Methods that mutate in place or only make sense with borrowing."""
    equivalent = frozenset({"and", "or", "and_", "or_", "from_", "into"})
    """Reserved words in Python, covered by a trailing underscore."""
    return pure_rust | equivalent


def _decorated(fn: Callable[..., Any]) -> Callable[..., Any]:
    if isinstance(fn, (staticmethod, classmethod)):
        return fn.__func__  # type: ignore[return-value]
    return fn


def _with_source(fn_name: str, src: Literal["python", "rust"]) -> tuple[str, str]:
    return (src, fn_name)


def missing_fns(dtype: type, rust_fns: set[str], filters: frozenset[str]) -> pl.LazyFrame:
    """Return the functions present on only one side, tagged with their source."""
    fn: pl.Expr = pl.col("fn")
    python_fns = {
        _decorated(member).__name__
        for klass in dtype.mro()
        for member in klass.__dict__.values()
        if callable(member) or isinstance(member, (staticmethod, classmethod))
    }
    rows = [_with_source(name, "python") for name in sorted(python_fns)] + [
        _with_source(name, "rust") for name in sorted(rust_fns)
    ]
    return (
        pl.LazyFrame(rows, schema=["source", "fn"], orient="row")
        .filter(
            fn.is_unique().and_(
                fn.str.starts_with("_").not_().and_(fn.is_in(list(filters)).not_())
            )
        )
        .sort(["source", "fn"])
    )


def main(dtype: type, rust_fns: set[str], filters: frozenset[str]) -> None:
    """Run the check and output the results to a ndjson file."""
    DATA.mkdir(parents=True, exist_ok=True)
    missing_fns(dtype, rust_fns, filters).sink_ndjson(
        DATA.joinpath(f"{dtype.__name__}_fns.ndjson")
    )


if __name__ == "__main__":
    main(pr.Option, OPTION_FN, _filters())
    main(pr.Result, RESULT_FN, _filters())
