"""Typer based command line entry points for SheetMerge."""

from __future__ import annotations

import glob
import logging
from pathlib import Path
from typing import List, Optional

import typer

from sheetmerge.core.errors import (
    MERGE_ERRORS,
    ConfigError,
    CorruptFileError,
    InputFileNotFoundError,
    InsufficientInputError,
    PersistenceError,
    UnsupportedFormatError,
)
from sheetmerge.core.logger import get_logger
from sheetmerge.core.profiles import MergeProfile, get_profile
from sheetmerge.services.merge import MergeEngine, MergeRequest, generate_report

EXIT_CODES: dict[type[Exception], int] = {
    ConfigError: 2,
    InsufficientInputError: 2,
    InputFileNotFoundError: 3,
    UnsupportedFormatError: 4,
    CorruptFileError: 5,
    PersistenceError: 6,
}

app = typer.Typer(help="Merge the rows of several .xlsx workbooks into one.")


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set global logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure global CLI behaviour before executing commands."""

    logger = get_logger()

    level_value = getattr(logging, log_level.upper(), None)
    if not isinstance(level_value, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    logger.setLevel(level_value)
    logging.getLogger("sheetmerge_io").setLevel(level_value)


def _expand_input_files(patterns: List[str]) -> list[str]:
    """Expand glob patterns in order; literal arguments pass through unchanged.

    Only glob matches are filtered: directories are dropped and a file matched
    by more than one pattern is kept once. Literal paths, repeats included,
    reach validation exactly as given.
    """

    collected: list[str] = []
    globbed: set[str] = set()
    for pattern in patterns:
        if not glob.has_magic(pattern):
            collected.append(pattern)
            continue
        matches = sorted(glob.glob(str(Path(pattern).expanduser())))
        if not matches:
            raise typer.BadParameter(f"No files matched pattern: {pattern}")
        for item in matches:
            if Path(item).is_dir() or item in globbed:
                continue
            globbed.add(item)
            collected.append(item)
    return collected


def _resolve_flag(flag: Optional[bool], profile: MergeProfile | None, name: str) -> bool:
    if flag is not None:
        return flag
    if profile is not None:
        return bool(getattr(profile, name))
    return False


def _exit_code(exc: Exception) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(exc, error_type):
            return code
    return 1


@app.command("merge")
def merge_command(
    inputs: List[str] = typer.Argument(..., help="Input .xlsx files or glob patterns; the first is the template."),
    output: Path = typer.Option(..., "--output", "-o", help="Output .xlsx path, replaced if it exists."),
    keep_headers: Optional[bool] = typer.Option(
        None, "--keep-headers/--no-keep-headers", help="Also copy row 1 of every non-template file."
    ),
    ignore_column_differences: Optional[bool] = typer.Option(
        None,
        "--ignore-column-differences/--no-ignore-column-differences",
        help="Merge files even if their column count differs from the template.",
    ),
    add_file_names: Optional[bool] = typer.Option(
        None, "--add-file-names/--no-add-file-names", help="Add a column with the path of the source file."
    ),
    source_column_label: Optional[str] = typer.Option(
        None, "--source-column-label", help="Header written above the source file column."
    ),
    profile_name: Optional[str] = typer.Option(None, "--profile", help="Profile name from profiles.yaml."),
    profiles_file: Optional[Path] = typer.Option(None, "--profiles-file", help="Alternative profiles.yaml."),
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", help="Write a Markdown/CSV merge report here."),
) -> None:
    """Merge INPUTS into OUTPUT using the first input as the template."""

    logger = get_logger()
    try:
        profile = get_profile(profile_name, profiles_file) if profile_name else None
        files = _expand_input_files(inputs)
        request = MergeRequest.build(
            files,
            output,
            keep_headers=_resolve_flag(keep_headers, profile, "keep_headers"),
            ignore_column_differences=_resolve_flag(ignore_column_differences, profile, "ignore_column_differences"),
            add_file_names=_resolve_flag(add_file_names, profile, "add_file_names"),
            source_column_label=source_column_label or (profile.source_column_label if profile else None),
        )
        outcome = MergeEngine(logger=logger).merge(request)
    except MERGE_ERRORS as exc:
        logger.error("sheetmerge.cli merge_failed: %s", exc)
        typer.secho(f"Merge failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=_exit_code(exc)) from exc

    for path in outcome.files_merged:
        typer.echo(f"merged  {path}")
    for path in outcome.files_skipped:
        typer.echo(f"skipped {path}")
    typer.secho(f"Saved {outcome.output_file}", fg=typer.colors.GREEN)

    target_report_dir = report_dir or (profile.report_dir if profile else None)
    if target_report_dir is not None:
        report_path, _ = generate_report(Path(target_report_dir), outcome)
        typer.echo(f"Report written to {report_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
