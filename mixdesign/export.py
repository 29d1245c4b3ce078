# mixdesign/export.py
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from .config import CSV_COLUMNS
from .runs import MixRun
from .utils import format_cell


def _free_text(value) -> str:
    return (value or "").replace(",", " ")


def run_row(run: MixRun) -> List[str]:
    p, i, r = run.project, run.input, run.result
    row = [
        run.id,
        run.timestamp,
        _free_text(p.project_name),
        _free_text(p.project_site),
        _free_text(p.mix_id),
        p.casting_date or "",
        i.fck,
        i.cement_grade,
        i.exposure,
        r.target_mean_strength,
        r.water_cement_ratio,
        r.water_content,
        r.cement_content,
        r.fine_aggregate,
        r.coarse_aggregate,
        r.checks.water_cement_ratio_ok,
        r.checks.cement_content_ok,
        r.checks.grade_ok,
    ]
    return [format_cell(v) for v in row]


def runs_dataframe(runs: Iterable[MixRun]) -> pd.DataFrame:
    """Tidy table of runs (text cells) for UI display and CSV export."""
    return pd.DataFrame([run_row(run) for run in runs], columns=CSV_COLUMNS, dtype=str)


def export_csv(runs: Iterable[MixRun]) -> str:
    df = runs_dataframe(runs)
    text = df.to_csv(index=False, lineterminator="\n")
    return text.rstrip("\n")
