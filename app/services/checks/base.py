"""
Base class for configuration security checks.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.schemas.analysis import Issue, Severity
from app.services.analyzer_config import AnalyzerConfig
from app.utils.parsers.config_models import ConfigLine, ParsedConfig

COMMENT_PREFIX = "!"


class SecurityCheck(ABC):
    """A single rule evaluated against the raw lines and the parsed model."""

    name: str = "check"

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    @abstractmethod
    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        """
        Run the check.

        Args:
            lines: Trimmed configuration lines
            parsed: Structured model built from the same lines

        Returns:
            Findings in the order they were detected
        """
        pass

    @staticmethod
    def is_comment(line: ConfigLine) -> bool:
        return line.text.startswith(COMMENT_PREFIX)

    def skips(self, line: ConfigLine) -> bool:
        """Whether a line-oriented check should pass over this line."""
        return self.config.skip_comment_lines and self.is_comment(line)

    @staticmethod
    def issue(
        severity: Severity,
        category: str,
        title: str,
        description: str,
        location: str,
        recommendation: str,
        reference_id: str = "N/A",
    ) -> Issue:
        return Issue(
            severity=severity,
            category=category,
            title=title,
            description=description,
            location=location,
            recommendation=recommendation,
            reference_id=reference_id,
        )
