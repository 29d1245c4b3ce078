# mixdesign/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np

from .config import CURVE_COEFFS


@dataclass(frozen=True)
class QuadraticCurve:
    name: str
    a: float
    b: float
    c: float

    def predict(self, x: float) -> float:
        # Keep this exact form; Horner's rule changes the last bits.
        return self.a * x * x + self.b * x + self.c

    def predict_array(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        return self.a * x * x + self.b * x + self.c


@dataclass(frozen=True)
class CurveSet:
    target_mean_strength: QuadraticCurve
    water_cement_ratio: QuadraticCurve
    water_content: QuadraticCurve
    cement_content: QuadraticCurve
    fine_aggregate: QuadraticCurve
    coarse_aggregate: QuadraticCurve

    def as_dict(self) -> Dict[str, QuadraticCurve]:
        return {
            "target_mean_strength": self.target_mean_strength,
            "water_cement_ratio": self.water_cement_ratio,
            "water_content": self.water_content,
            "cement_content": self.cement_content,
            "fine_aggregate": self.fine_aggregate,
            "coarse_aggregate": self.coarse_aggregate,
        }

    def evaluate(self, fck: float) -> Dict[str, float]:
        return {name: curve.predict(fck) for name, curve in self.as_dict().items()}


def build_curves(coeffs=CURVE_COEFFS) -> CurveSet:
    curves = {name: QuadraticCurve(name, *map(float, abc)) for name, abc in coeffs.items()}
    return CurveSet(**curves)
