"""JSON API routes: /health, /api/v1/*."""

import json
import logging

from fastapi import APIRouter, HTTPException

from ...config import get_settings
from ...core.api import validate_documents, validate_urls
from ...core.config import ValidationConfig, vendor_policy_for
from ...core.errors import InputError
from ...core.registry import list_grammars, list_scanners
from ...core.sources import SourceItem
from ...core.validate import Report
from ...logging import report_to_loggable
from ..schemas import ValidateRequest, ValidateUrlsRequest, ValidationOptions

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _config_from_options(options: ValidationOptions) -> ValidationConfig:
    return ValidationConfig(
        vendor_policy=vendor_policy_for(options.vendor),
        strict=options.strict,
        scan_keys=options.scan_keys,
        skip_tokens=tuple(token for token in options.skip_tokens if token.strip()),
        grammar=options.grammar,
    )


def _log_report(report: Report) -> None:
    loggable = report_to_loggable(report)
    if loggable is not None:
        logger.debug("Validation report:\n%s", json.dumps(loggable, ensure_ascii=False, indent=2))


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/grammars")
def grammars() -> dict:
    return {"grammars": list_grammars(), "formats": list_scanners()}


@router.post("/api/v1/validate")
def validate_from_api(payload: ValidateRequest) -> dict:
    if len(payload.documents) > settings.max_documents:
        raise HTTPException(
            status_code=413,
            detail=f"Too many documents: {len(payload.documents)} (limit {settings.max_documents})",
        )

    try:
        config = _config_from_options(payload)
        report = validate_documents(
            [SourceItem(file_id=document.file, content=document.content) for document in payload.documents],
            config,
        )
    except (KeyError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc).strip("'\"")) from exc

    _log_report(report)
    return report.to_dict()


@router.post("/api/v1/validate/urls")
def validate_urls_from_api(payload: ValidateUrlsRequest) -> dict:
    urls = [url.strip() for url in payload.urls_list if url.strip()]
    if not urls:
        raise HTTPException(status_code=400, detail="urls is required")
    if len(urls) > settings.max_documents:
        raise HTTPException(
            status_code=413,
            detail=f"Too many documents: {len(urls)} (limit {settings.max_documents})",
        )

    try:
        config = _config_from_options(payload)
        report = validate_urls(urls, config, timeout=settings.url_timeout)
    except InputError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except (KeyError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc).strip("'\"")) from exc

    _log_report(report)
    return report.to_dict()


__all__ = ["router"]
