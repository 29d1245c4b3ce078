# mixdesign/design.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from .config import CURVE_FCK_RANGE, CURVE_POINTS, OUTPUT_DECIMALS
from .errors import MISSING, NON_NUMERIC, NON_POSITIVE, NOT_FINITE, InvalidStrength
from .exposure import ExposureClass, resolve_exposure
from .models import CurveSet, build_curves
from .utils import round_half_away


def parse_strength(raw: Any) -> float:
    """
    Coerce a raw fck value (number or numeric string) to a float.

    None / '' / whitespace      -> InvalidStrength('missing')
    bool, junk text, objects    -> InvalidStrength('non_numeric')
    nan, inf                    -> InvalidStrength('not_finite')
    0, negatives (also '0')     -> InvalidStrength('non_positive')
    """
    if raw is None:
        raise InvalidStrength(MISSING, raw)
    if isinstance(raw, bool):
        raise InvalidStrength(NON_NUMERIC, raw)

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise InvalidStrength(MISSING, raw)
        try:
            x = float(text)
        except ValueError:
            raise InvalidStrength(NON_NUMERIC, raw) from None
    else:
        try:
            x = float(raw)
        except OverflowError:
            raise InvalidStrength(NOT_FINITE, raw) from None
        except (TypeError, ValueError):
            raise InvalidStrength(NON_NUMERIC, raw) from None

    if not math.isfinite(x):
        raise InvalidStrength(NOT_FINITE, raw)
    if x <= 0:
        raise InvalidStrength(NON_POSITIVE, raw)
    return x


@dataclass(frozen=True)
class ComplianceChecks:
    water_cement_ratio_ok: bool
    cement_content_ok: bool
    grade_ok: bool
    exposure: ExposureClass

    @property
    def all_ok(self) -> bool:
        return self.water_cement_ratio_ok and self.cement_content_ok and self.grade_ok

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isWcOk": self.water_cement_ratio_ok,
            "isCementOk": self.cement_content_ok,
            "isGradeOk": self.grade_ok,
            "limits": self.exposure.to_dict(),
        }


@dataclass(frozen=True)
class MixDesignResult:
    target_mean_strength: float   # MPa
    water_cement_ratio: float     # -
    water_content: float          # kg/m³
    cement_content: float         # kg/m³
    fine_aggregate: float         # kg/m³
    coarse_aggregate: float       # kg/m³
    checks: ComplianceChecks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fckMean": self.target_mean_strength,
            "w_c": self.water_cement_ratio,
            "water": self.water_content,
            "cement": self.cement_content,
            "fineAgg": self.fine_aggregate,
            "coarseAgg": self.coarse_aggregate,
            "checks": self.checks.to_dict(),
        }


def evaluate_checks(raw: Dict[str, float], fck: float, limits: ExposureClass) -> ComplianceChecks:
    # Checks use unrounded values; rounding is for display only.
    return ComplianceChecks(
        water_cement_ratio_ok=raw["water_cement_ratio"] <= limits.max_water_cement_ratio,
        cement_content_ok=raw["cement_content"] >= limits.min_cement_content,
        grade_ok=fck >= limits.min_grade_fck,
        exposure=limits,
    )


class MixDesignCalculator:
    """Stateless: fck + exposure -> rounded quantities and durability checks."""

    def __init__(self, curves: Optional[CurveSet] = None):
        self.curves = curves or build_curves()

    def compute(self, fck: Any, exposure: Any = None) -> MixDesignResult:
        x = parse_strength(fck)
        limits = resolve_exposure(exposure)

        raw = self.curves.evaluate(x)
        if not all(math.isfinite(v) for v in raw.values()):
            raise InvalidStrength(NOT_FINITE, fck)

        checks = evaluate_checks(raw, x, limits)
        rounded = {k: round_half_away(v, OUTPUT_DECIMALS[k]) for k, v in raw.items()}
        return MixDesignResult(checks=checks, **rounded)


_DEFAULT_CALCULATOR = MixDesignCalculator()


def compute_mix_design(fck: Any, exposure: Any = None) -> Optional[MixDesignResult]:
    """Sentinel form: None instead of InvalidStrength."""
    try:
        return _DEFAULT_CALCULATOR.compute(fck, exposure)
    except InvalidStrength:
        return None


def design_curve_table(
    fck_min: float = CURVE_FCK_RANGE[0],
    fck_max: float = CURVE_FCK_RANGE[1],
    n_points: int = CURVE_POINTS,
    exposure: Any = None,
    curves: Optional[CurveSet] = None,
) -> pd.DataFrame:
    """
    Unrounded curve values over an fck grid, one row per grid point, plus the
    three compliance flags for the given exposure. Used for charts.
    """
    lo = parse_strength(fck_min)
    hi = float(fck_max)
    if not hi > lo:
        raise ValueError("fck_max must be greater than fck_min")
    if int(n_points) < 2:
        raise ValueError("n_points must be at least 2")

    curves = curves or build_curves()
    limits = resolve_exposure(exposure)

    fck_grid = np.linspace(lo, hi, int(n_points))
    df = pd.DataFrame({"fck": fck_grid})
    for name, curve in curves.as_dict().items():
        df[name] = curve.predict_array(fck_grid)

    df["water_cement_ratio_ok"] = df["water_cement_ratio"] <= limits.max_water_cement_ratio
    df["cement_content_ok"] = df["cement_content"] >= limits.min_cement_content
    df["grade_ok"] = df["fck"] >= limits.min_grade_fck
    return df
