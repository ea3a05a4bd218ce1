from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import Field

from site_spec_drafter.auto_fix import fix_spec_content
from site_spec_drafter.logging_config import set_trace_id, setup_logging
from site_spec_drafter.models.intake import IntakeRecord, SpecContext
from site_spec_drafter.models.spec import SiteIntentDocument, SpecModel
from site_spec_drafter.models.validation import AutoFix, ValidationWarning
from site_spec_drafter.pipeline import DeterministicPipeline
from site_spec_drafter.validator import validate_spec_content


class SpecCheckRequest(SpecModel):
    spec: SiteIntentDocument
    context: SpecContext


class GenerateSpecResponse(SpecModel):
    spec: SiteIntentDocument
    warnings: list[ValidationWarning] = Field(default_factory=list)
    fixes: list[AutoFix] = Field(default_factory=list)
    sub_type: str


class ValidateSpecResponse(SpecModel):
    warnings: list[ValidationWarning]
    sub_type: str


class FixSpecResponse(SpecModel):
    spec: SiteIntentDocument
    fixes: list[AutoFix]
    sub_type: str


# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
AUTO_FIX_ENABLED = os.getenv("AUTO_FIX_ENABLED", "true").lower() in {"1", "true", "yes"}

setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)
logger = logging.getLogger(__name__)

app = FastAPI(title="Site Spec Drafter API", version="0.1.0")

pipeline = DeterministicPipeline(auto_fix=AUTO_FIX_ENABLED)


@app.post(
    "/v1/specs:generate",
    response_model=GenerateSpecResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def generate_spec(intake: IntakeRecord) -> GenerateSpecResponse:
    set_trace_id(intake.session_id)
    try:
        result = pipeline.run(intake)
    except Exception as exc:
        logger.error(
            "Spec generation failed",
            extra={"session_id": intake.session_id, "error": str(exc)},
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Spec generation failed") from exc
    return GenerateSpecResponse(
        spec=result.spec,
        warnings=result.warnings,
        fixes=result.fixes,
        sub_type=result.sub_type,
    )


@app.post(
    "/v1/specs:validate",
    response_model=ValidateSpecResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def validate_spec(request: SpecCheckRequest) -> ValidateSpecResponse:
    set_trace_id(request.spec.session_id)
    result = validate_spec_content(request.spec, request.context)
    return ValidateSpecResponse(warnings=result.warnings, sub_type=result.sub_type)


@app.post(
    "/v1/specs:fix",
    response_model=FixSpecResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def fix_spec(request: SpecCheckRequest) -> FixSpecResponse:
    set_trace_id(request.spec.session_id)
    result = fix_spec_content(request.spec, request.context)
    return FixSpecResponse(spec=result.spec, fixes=result.fixes, sub_type=result.sub_type)


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok", "environment": ENVIRONMENT})
