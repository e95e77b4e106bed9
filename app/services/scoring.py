"""
Security score calculation.
"""
import logging
from typing import Optional

from app.schemas.analysis import PasswordAnalysis, SeverityCounts
from app.services.analyzer_config import AnalyzerConfig

logger = logging.getLogger(__name__)


def calculate_security_score(
    counts: SeverityCounts,
    password_analysis: Optional[PasswordAnalysis] = None,
    config: Optional[AnalyzerConfig] = None,
) -> int:
    """
    Calculate the overall security score (0-100).

    The supplied password's strength tier picks the starting score and the
    per-severity deductions; without a password the full 100-point scale
    applies.

    Args:
        counts: Findings per severity
        password_analysis: Result of the password analyzer, if a password was supplied
        config: Analyzer config holding the weight tables

    Returns:
        Security score clamped to 0-100
    """
    config = config or AnalyzerConfig()
    strength = password_analysis.strength if password_analysis else None
    weights = config.weights_for(strength)

    score = weights.base - (
        counts.critical * weights.critical
        + counts.high * weights.high
        + counts.medium * weights.medium
        + counts.low * weights.low
    )
    return max(0, min(100, score))
