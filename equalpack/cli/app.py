import json
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Any

import typer

from equalpack.diff import AssertionResult, check_equal, render_assertion
from equalpack.documents import DocumentError, read_document

app = typer.Typer(help="EqualKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("equalkit")
    except PackageNotFoundError:
        from equalkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show EqualKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(message: str, *, json_output: bool, **context: Any) -> None:
    if json_output:
        _echo_json({"status": "error", "exit_code": 1, "message": message, **context})
    else:
        _echo(message, err=True)


def _render_diff_summary(result: AssertionResult, *, left: Path, right: Path) -> str:
    mode = " strict=true" if result.strict else ""
    return (
        f"left={left} right={right} identical={str(result.passed).lower()} "
        f"changed={len(result.changes)}{mode}"
    )


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Path to left JSON document."),
    right: Path = typer.Argument(..., help="Path to right JSON document."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Require identical key sets, array lengths and container types.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of field-level changes to print in text mode.",
    ),
) -> None:
    """Diff two JSON documents key by key."""
    try:
        left_document = read_document(left)
        right_document = read_document(right)
    except DocumentError as error:
        _fail(
            f"diff failed: {error}",
            json_output=json_output,
            left_path=str(left),
            right_path=str(right),
        )
        raise typer.Exit(code=1) from error

    result = check_equal(right_document, left_document, strict=strict)

    if json_output:
        payload = result.to_dict()
        _echo_json(
            {
                **payload,
                "diff_status": payload["status"],
                "identical": result.passed,
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "left_path": str(left),
                "right_path": str(right),
            }
        )
        return

    _echo(_render_diff_summary(result, left=left, right=right))
    _echo(render_assertion(result, max_changes=max_changes))


@app.command(name="assert")
def assert_documents(
    baseline: Path = typer.Argument(..., help="Path to baseline JSON document."),
    candidate: Path | None = typer.Option(
        None,
        "--candidate",
        "-c",
        help="Path to candidate JSON document to compare against baseline.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Require identical key sets, array lengths and container types.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of field-level changes to print in text mode.",
    ),
) -> None:
    """Assert a candidate document is equivalent to the baseline."""
    if candidate is None:
        _fail(
            "assert failed: missing candidate document. Provide --candidate PATH.",
            json_output=json_output,
        )
        raise typer.Exit(code=1)

    try:
        baseline_document = read_document(baseline)
        candidate_document = read_document(candidate)
    except DocumentError as error:
        _fail(f"assert failed: {error}", json_output=json_output)
        raise typer.Exit(code=1) from error

    result = check_equal(candidate_document, baseline_document, strict=strict)

    if json_output:
        payload = result.to_dict()
        payload["baseline_path"] = str(baseline)
        payload["candidate_path"] = str(candidate)
        _echo_json(payload)
    else:
        if result.passed:
            mode = "assert passed (strict)" if strict else "assert passed"
            _echo(f"{mode}: baseline={baseline} candidate={candidate}")
        else:
            _echo(
                f"assert failed: divergence detected (baseline={baseline} candidate={candidate})",
                force=True,
            )
            _echo(render_assertion(result, max_changes=max_changes))

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
