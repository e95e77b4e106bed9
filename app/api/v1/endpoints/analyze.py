"""
Configuration analysis endpoints.

The analyzer itself never rejects input; these routes are responsible for
turning empty, oversized or implausible submissions into 4xx responses
before the analyzer runs.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.core.auth import APIClient, get_current_api_client
from app.core.config import settings
from app.schemas.analysis import AnalysisResult, PasswordAnalysis
from app.schemas.requests import (
    AnalyzeTextRequest,
    FileAnalyzeResponse,
    PasswordRequest,
    TextAnalyzeResponse,
)
from app.services.analysis_service import get_default_analyzer
from app.utils.validators import format_file_size, get_security_rating, validate_config_content

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_within_size_limit(size: int) -> None:
    if size > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Configuration exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE} bytes",
        )


def _ensure_plausible_config(config_text: str) -> None:
    validation = validate_config_content(config_text)
    if not validation.valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(validation.errors),
        )


def _run_analysis(config_text: str, password: Optional[str]) -> tuple:
    start_time = time.perf_counter()
    analysis: AnalysisResult = get_default_analyzer().analyze(config_text, password)
    analysis_ms = int((time.perf_counter() - start_time) * 1000)
    return analysis, f"{analysis_ms}ms"


@router.post("/analyze", response_model=FileAnalyzeResponse)
async def analyze_config_file(
    file: Optional[UploadFile] = File(None, description="Configuration dump (.txt)"),
    config_file: Optional[UploadFile] = File(
        None, alias="configFile", description="Same as file, under the original web client's field name"
    ),
    password: Optional[str] = Form(None, description="Optional admin password to rate"),
    _client: APIClient = Depends(get_current_api_client),
):
    """
    Analyze an uploaded router/switch configuration file.

    The file may be sent as either the ``file`` or the ``configFile`` form field.
    Returns findings, severity counts, a 0-100 security score and recommendations.
    """
    try:
        file = file or config_file
        if file is None or not file.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No configuration file provided. Please upload a .txt file.",
            )

        if not file.filename.lower().endswith(".txt") and file.content_type != "text/plain":
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only .txt files are supported",
            )

        content = await file.read()
        _ensure_within_size_limit(len(content))

        config_text = content.decode("utf-8", errors="ignore")
        _ensure_plausible_config(config_text)

        logger.info(f"Analyzing file '{file.filename}' ({len(content)} bytes)")
        analysis, analysis_time = _run_analysis(config_text, password)

        logger.info(
            f"Analysis of '{file.filename}' finished in {analysis_time}: "
            f"issues={analysis.total_issues}, score={analysis.security_score}"
        )

        return FileAnalyzeResponse(
            filename=file.filename,
            file_size=len(content),
            file_size_display=format_file_size(len(content)),
            analysis_time=analysis_time,
            timestamp=datetime.now(timezone.utc),
            rating=get_security_rating(analysis.security_score),
            analysis=analysis,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Analysis error for uploaded file: {e}", exc_info=True)
        if settings.DEBUG:
            detail = f"Failed to analyze configuration file: {type(e).__name__}: {e}"
        else:
            detail = "Failed to analyze configuration file."
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


@router.post("/analyze-text", response_model=TextAnalyzeResponse)
async def analyze_config_text(
    payload: AnalyzeTextRequest,
    _client: APIClient = Depends(get_current_api_client),
):
    """
    Analyze configuration text sent directly in the request body.
    """
    try:
        config_text = payload.config_text
        if not config_text.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Configuration text is empty.",
            )

        _ensure_within_size_limit(len(config_text.encode("utf-8")))
        _ensure_plausible_config(config_text)

        logger.info(f"Analyzing text ({len(config_text)} characters)")
        analysis, analysis_time = _run_analysis(config_text, payload.password)

        return TextAnalyzeResponse(
            text_length=len(config_text),
            analysis_time=analysis_time,
            timestamp=datetime.now(timezone.utc),
            rating=get_security_rating(analysis.security_score),
            analysis=analysis,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Analysis error for text payload: {e}", exc_info=True)
        if settings.DEBUG:
            detail = f"Failed to analyze configuration text: {type(e).__name__}: {e}"
        else:
            detail = "Failed to analyze configuration text."
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


@router.post("/analyze-password", response_model=PasswordAnalysis)
async def analyze_admin_password(
    payload: PasswordRequest,
    _client: APIClient = Depends(get_current_api_client),
):
    """
    Rate a single router credential without a configuration.
    """
    return get_default_analyzer().analyze_password(payload.password)
