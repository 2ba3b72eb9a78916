"""Reporting utilities for the merge service."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from .models import MergeOutcome

REPORT_COLUMNS = ("file", "status", "rows", "columns", "rows_appended", "reason")


def outcome_frame(outcome: MergeOutcome) -> pd.DataFrame:
    """Tabulate the per-file entries of a merge outcome, in input order."""

    records = [
        {
            "file": entry.path,
            "status": entry.status.value,
            "rows": entry.rows,
            "columns": entry.columns,
            "rows_appended": entry.rows_appended,
            "reason": entry.mismatch.describe() if entry.mismatch else "",
        }
        for entry in outcome.entries
    ]
    return pd.DataFrame.from_records(records, columns=list(REPORT_COLUMNS))


def generate_report(output_dir: Path, outcome: MergeOutcome) -> tuple[Path, Path]:
    """Generate Markdown report and side CSV export."""

    output_dir.mkdir(parents=True, exist_ok=True)

    frame = outcome_frame(outcome)
    csv_path = output_dir / "merge_files.csv"
    frame.to_csv(csv_path, index=False)

    report_path = output_dir / "merge_report.md"

    lines = ["# Merge Report", ""]
    lines.append(f"- Output: `{outcome.output_file}`")
    lines.append(f"- Files merged: {len(outcome.files_merged)}")
    lines.append(f"- Files skipped: {len(outcome.files_skipped)}")
    lines.append(f"- Rows appended: {outcome.rows_appended}")
    lines.append("")

    skipped = frame[frame["status"] == "skipped"]
    if not skipped.empty:
        lines.append("## Skipped files")
        for _, row in skipped.iterrows():
            lines.append(f"- **{row['file']}**: {row['reason']}")
        lines.append("")

    lines.append(f"Per-file details exported to `{csv_path.name}`.")

    report_path.write_text("\n".join(lines), encoding="utf-8")
    return report_path, csv_path
