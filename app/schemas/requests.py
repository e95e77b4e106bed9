"""Request and response envelopes for the analysis endpoints."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.analysis import AnalysisResult


class AnalyzeTextRequest(BaseModel):
    """JSON body for text analysis."""
    model_config = ConfigDict(populate_by_name=True)

    config_text: str = Field(alias="configText")
    password: Optional[str] = None


class PasswordRequest(BaseModel):
    """JSON body for standalone password analysis."""
    password: Optional[str] = None


class AnalyzeResponse(BaseModel):
    """Fields shared by the analysis envelopes."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    analysis_time: str = Field(alias="analysisTime")
    timestamp: datetime
    rating: str
    analysis: AnalysisResult


class FileAnalyzeResponse(AnalyzeResponse):
    """Envelope returned for an uploaded configuration file."""
    filename: str
    file_size: int = Field(alias="fileSize")
    file_size_display: str = Field(alias="fileSizeDisplay")


class TextAnalyzeResponse(AnalyzeResponse):
    """Envelope returned for configuration text sent in the request body."""
    text_length: int = Field(alias="textLength")
