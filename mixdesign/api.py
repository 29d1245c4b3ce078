# mixdesign/api.py
# Mix Design HTTP API
# Run:
#   uvicorn mixdesign.api:app --port 4000
#   python -m mixdesign.api
from __future__ import annotations

import logging
from typing import Any, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from . import config
from .errors import InvalidStrength
from .export import export_csv
from .runs import MixDesignService

logger = logging.getLogger(__name__)


# -------------------------
# Request models
# -------------------------
class MixDesignRequest(BaseModel):
    # fck, cementGrade and exposure stay loose here; the core owns coercion
    # and the mild fallback for unknown exposures
    fck: Any = Field(None)
    cementGrade: Any = Field(None)
    exposure: Any = Field(None)
    projectName: Optional[str] = Field(None)
    projectSite: Optional[str] = Field(None)
    mixId: Optional[str] = Field(None)
    castingDate: Optional[str] = Field(None)


def get_service(request: Request) -> MixDesignService:
    return request.app.state.service


def create_app(service: Optional[MixDesignService] = None) -> FastAPI:
    app = FastAPI(title="Mix Design API", version="1.0")
    app.state.service = service if service is not None else MixDesignService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/mix-design")
    def create_mix_design(
        payload: Optional[MixDesignRequest] = None,
        svc: MixDesignService = Depends(get_service),
    ):
        payload = payload or MixDesignRequest()
        try:
            run = svc.create_run(
                fck=payload.fck,
                cement_grade=payload.cementGrade,
                exposure=payload.exposure,
                project_name=payload.projectName,
                project_site=payload.projectSite,
                mix_id=payload.mixId,
                casting_date=payload.castingDate,
            )
        except InvalidStrength as e:
            logger.info("Rejected mix design request: %s (fck=%r)", e.reason, e.raw)
            return JSONResponse(status_code=400, content={"success": False, "message": e.message})
        return {"success": True, "data": run.to_dict()}

    @app.get("/api/mix-design/runs")
    def list_mix_design_runs(svc: MixDesignService = Depends(get_service)):
        runs = svc.list_runs()
        return {"success": True, "count": len(runs), "data": [r.to_dict() for r in runs]}

    @app.get("/api/mix-design/export.csv")
    def export_mix_design_runs(svc: MixDesignService = Depends(get_service)):
        return Response(
            content=export_csv(svc.all_runs()),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{config.CSV_FILENAME}"'},
        )

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run(host: str = config.HOST, port: int = config.PORT) -> None:
    config.configure_logging()
    logger.info("Mix Design API running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
