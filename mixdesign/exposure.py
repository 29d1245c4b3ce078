# mixdesign/exposure.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List

from .config import DEFAULT_EXPOSURE, EXPOSURES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExposureClass:
    key: str
    label: str
    max_water_cement_ratio: float
    min_cement_content: float   # kg/m³
    min_grade_fck: float        # MPa

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "maxWc": self.max_water_cement_ratio,
            "minCement": self.min_cement_content,
            "minGradeFck": self.min_grade_fck,
        }


def _build_catalog():
    catalog = {}
    for key, v in EXPOSURES.items():
        catalog[key] = ExposureClass(
            key=key,
            label=v["label"],
            max_water_cement_ratio=float(v["maxWc"]),
            min_cement_content=float(v["minCement"]),
            min_grade_fck=float(v["minGradeFck"]),
        )
    return MappingProxyType(catalog)


# Built once at import, read-only afterwards
EXPOSURE_CLASSES = _build_catalog()


def resolve_exposure(identifier: Any = None) -> ExposureClass:
    """
    Look up an exposure class by key.

    Never fails: None, '', non-string values and unknown keys all resolve to
    the 'mild' class. This keeps the historical behavior, but it also means a
    typo such as 'Severe' silently designs for mild exposure.
    """
    if isinstance(identifier, str) and identifier in EXPOSURE_CLASSES:
        return EXPOSURE_CLASSES[identifier]
    if identifier not in (None, ""):
        logger.debug("Unknown exposure %r, falling back to %s", identifier, DEFAULT_EXPOSURE)
    return EXPOSURE_CLASSES[DEFAULT_EXPOSURE]


def exposure_keys() -> List[str]:
    return list(EXPOSURE_CLASSES.keys())
