"""Convenience helpers for scheduling deadlines stored in a file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .deadlines import from_one_based
from .errors import OutOfRange
from .scheduler import DeadlineScheduler, ScheduleResult, SchedulerConfig


def schedule_file(
    input_path: str | Path,
    output_path: str | Path | None,
    config: Optional[SchedulerConfig] = None,
    deadline_column: str = "deadline",
) -> ScheduleResult | None:
    """Schedule the 1-based deadlines in `input_path` and write the schedule."""

    input_path = Path(input_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    if deadline_column not in dataframe.columns:
        print(f"ERROR: Column '{deadline_column}' not found in '{input_path}'.")
        return None

    missing = dataframe.index[dataframe[deadline_column].isna()].tolist()
    if missing:
        rows = ", ".join(str(row + 2) for row in missing)
        print(f"ERROR: missing deadline in '{input_path}' (row(s) {rows})")
        return None

    deadlines = from_one_based(dataframe[deadline_column].tolist())
    scheduler = DeadlineScheduler(config)
    try:
        result = scheduler.schedule(deadlines)
    except OutOfRange as exc:
        print(f"ERROR: {exc} (deadlines in '{input_path}' are 1-based)")
        return None
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None

    if output_path is not None:
        try:
            _save_dataframe(result.dataframe, output_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
        if scheduler.config.verbose:
            print(f"\n   Schedule saved to '{output_path}'")
    return result


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
