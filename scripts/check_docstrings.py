"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import pyoresult as pr

SRC_DIR = Path().joinpath("src", "pyoresult")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "wraps"})


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    errors: tuple[str, ...]


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


def check_file(file_path: Path) -> list[DocstringError]:
    """Return the docstring errors of every function in the file."""
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []

    return [
        error.unwrap()
        for node in ast.walk(tree)
        if _is_documentable(node) and not _has_skip_decorator(node)
        for error in (_process_node(file_path, node),)
        if error.is_some()
    ]


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> pr.Option[DocstringError]:
    docstring = pr.Option.from_(ast.get_docstring(node))
    if docstring.is_none():
        if _is_public(node) and not _is_variant_override(node):
            return pr.Some(
                DocstringError(file_path, node.name, node.lineno, ("Missing docstring",))
            )
        return pr.NONE

    match check_code_blocks(docstring.unwrap(), node.lineno):
        case pr.Err(errors):
            return pr.Some(
                DocstringError(
                    file_path,
                    node.name,
                    errors[0].line_no,
                    tuple(e.message for e in errors),
                )
            )
        case _:
            return pr.NONE


def _is_variant_override(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Variant methods inherit the docstring of the abstract method they implement."""
    return node.name in {"is_some", "is_none", "unwrap", "is_ok", "is_err"}


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def check_code_blocks(
    docstring: str, start_line: int
) -> pr.Result[None, tuple[ErrorDetail, ...]]:
    """Check that every code fence opened in the docstring is closed."""
    marker = "```"
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    for line_num, line in enumerate(docstring.split("\n")):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if not match:
            continue
        if line.strip() == marker:
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        start_line + line_num,
                        "Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((line_num + 1, match.group(1) or "plaintext"))

    errors.extend(
        ErrorDetail(start_line + idx - 1, f"Unclosed ```{lang} block")
        for idx, lang in stack
    )
    if errors:
        return pr.Err(tuple(errors))
    return pr.Ok(None)


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


if __name__ == "__main__":
    main()
