"""
Input validation and presentation helpers used by the HTTP layer.

The analyzer accepts any text; rejecting empty or implausible input is the
caller's job and happens here before analysis.
"""
import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.config import settings

logger = logging.getLogger(__name__)

# At least one of these must appear for text to look like a device configuration
CONFIG_KEYWORDS = ["interface", "ip", "router", "line", "access"]


class ContentValidation(BaseModel):
    """Outcome of validating configuration text."""
    valid: bool = True
    errors: List[str] = Field(default_factory=list)


def validate_config_content(content: Optional[str], min_length: Optional[int] = None) -> ContentValidation:
    """
    Check that text is non-empty and looks like a network configuration.

    Args:
        content: Configuration text
        min_length: Shortest accepted text (defaults to settings.MIN_CONFIG_LENGTH)

    Returns:
        ContentValidation listing every problem found
    """
    if min_length is None:
        min_length = settings.MIN_CONFIG_LENGTH
    content = content or ""
    errors = []

    if not content.strip():
        errors.append("Configuration file is empty")

    if len(content) < min_length:
        errors.append("Configuration file is too short")

    content_lower = content.lower()
    if not any(keyword in content_lower for keyword in CONFIG_KEYWORDS):
        errors.append("File does not appear to be a valid network configuration")

    if errors:
        logger.debug(f"Rejected configuration content: {errors}")
    return ContentValidation(valid=not errors, errors=errors)


def get_security_rating(score: int) -> str:
    """Map a 0-100 security score to a rating label."""
    if score >= 90:
        return "Excellent"
    if score >= 75:
        return "Good"
    if score >= 50:
        return "Fair"
    if score >= 25:
        return "Poor"
    return "Critical"


def format_file_size(size_bytes: int) -> str:
    """Human-readable file size, e.g. "1.5 KB"."""
    if size_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(units) - 1:
        size /= 1024
        unit += 1
    return f"{round(size, 2):g} {units[unit]}"
