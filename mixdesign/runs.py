# mixdesign/runs.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .config import MIX_ID_TEMPLATE
from .design import MixDesignCalculator, MixDesignResult, parse_strength
from .store import RunStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectInfo:
    project_name: str
    project_site: str
    mix_id: str
    casting_date: str   # YYYY-MM-DD

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projectName": self.project_name,
            "projectSite": self.project_site,
            "mixId": self.mix_id,
            "castingDate": self.casting_date,
        }


@dataclass(frozen=True)
class RunInput:
    fck: float
    cement_grade: Any
    exposure: str   # resolved key, never the raw request value

    def to_dict(self) -> Dict[str, Any]:
        return {"fck": self.fck, "cementGrade": self.cement_grade, "exposure": self.exposure}


@dataclass(frozen=True)
class MixRun:
    id: int
    timestamp: str
    project: ProjectInfo
    input: RunInput
    result: MixDesignResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "project": self.project.to_dict(),
            "input": self.input.to_dict(),
            "result": self.result.to_dict(),
        }


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(dt: datetime) -> str:
    """2026-01-02T03:04:05.678Z (UTC, millisecond precision)."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class MixDesignService:
    """Computes mix designs and records each one as a run."""

    def __init__(
        self,
        store: Optional[RunStore] = None,
        calculator: Optional[MixDesignCalculator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store if store is not None else RunStore()
        self.calculator = calculator or MixDesignCalculator()
        self.clock = clock or _utc_now

    def create_run(
        self,
        fck: Any,
        cement_grade: Any = None,
        exposure: Any = None,
        project_name: Optional[str] = None,
        project_site: Optional[str] = None,
        mix_id: Optional[str] = None,
        casting_date: Optional[str] = None,
    ) -> MixRun:
        # InvalidStrength propagates before an id is reserved
        result = self.calculator.compute(fck, exposure)
        fck_value = parse_strength(fck)

        run_id = self.store.next_id()
        now = self.clock()
        timestamp = iso_timestamp(now)

        run = MixRun(
            id=run_id,
            timestamp=timestamp,
            project=ProjectInfo(
                project_name=project_name or "",
                project_site=project_site or "",
                mix_id=mix_id or MIX_ID_TEMPLATE.format(run_id),
                casting_date=casting_date or timestamp[:10],
            ),
            input=RunInput(
                fck=fck_value,
                cement_grade=cement_grade or None,
                exposure=result.checks.exposure.key,
            ),
            result=result,
        )
        self.store.append(run)

        logger.info(
            "Recorded run %d (%s): fck=%g exposure=%s w/c=%.3f checks wc=%s cement=%s grade=%s",
            run.id, run.project.mix_id, fck_value, run.input.exposure,
            result.water_cement_ratio, result.checks.water_cement_ratio_ok,
            result.checks.cement_content_ok, result.checks.grade_ok,
        )
        return run

    def list_runs(self) -> List[MixRun]:
        """Latest first; ties on timestamp go to the higher id."""
        return sorted(self.store.all(), key=lambda r: (r.timestamp, r.id), reverse=True)

    def all_runs(self) -> List[MixRun]:
        """Insertion order (what the CSV export uses)."""
        return self.store.all()
