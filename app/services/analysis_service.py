"""
Service for rule-based security analysis of router configurations.
"""
import logging
from typing import List, Optional, Sequence

from app.schemas.analysis import AnalysisResult, Issue, PasswordAnalysis, SeverityCounts
from app.services.analyzer_config import AnalyzerConfig
from app.services.checks import SecurityCheck, build_default_checks
from app.services.password_analyzer import PasswordAnalyzer
from app.services.recommendations import generate_recommendations
from app.services.scoring import calculate_security_score
from app.utils.parsers.config_models import ConfigLine, ParsedConfig
from app.utils.parsers.ios_parser import IOSConfigParser

logger = logging.getLogger(__name__)


class ConfigAnalyzer:
    """Runs the parser, every registered check, and the scoring pipeline."""

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        checks: Optional[Sequence[SecurityCheck]] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            config: Dictionaries and weight tables (defaults if omitted)
            checks: Ordered checks to run (built-in checks if omitted)
        """
        self.config = config or AnalyzerConfig()
        self.checks = list(checks) if checks is not None else build_default_checks(self.config)
        self.password_analyzer = PasswordAnalyzer(self.config)

    def analyze(self, config_text: Optional[str], password: Optional[str] = None) -> AnalysisResult:
        """
        Perform security analysis on configuration text.

        Never raises for malformed input: unrecognized lines simply produce
        no findings. An empty document yields no findings and a score of 100.

        Args:
            config_text: Raw configuration text
            password: Optional admin credential to rate alongside the configuration

        Returns:
            AnalysisResult with findings, counts, score and recommendations
        """
        parser = IOSConfigParser(config_text or "")
        parsed = parser.parse()

        issues = self._run_checks(parser.lines, parsed)

        password_analysis = None
        if password:
            password_analysis = self.password_analyzer.analyze(password)
            issues.extend(password_analysis.issues)

        counts = SeverityCounts.from_issues(issues)
        security_score = calculate_security_score(counts, password_analysis, self.config)
        recommendations = generate_recommendations(counts, security_score)

        logger.info(
            f"Analysis complete: lines={len(parser.lines)}, issues={counts.total} "
            f"(critical={counts.critical}, high={counts.high}, medium={counts.medium}, "
            f"low={counts.low}), score={security_score}"
        )

        return AnalysisResult(
            total_issues=counts.total,
            critical=counts.critical,
            high=counts.high,
            medium=counts.medium,
            low=counts.low,
            security_score=security_score,
            issues=issues,
            recommendations=recommendations,
            password_analysis=password_analysis,
            config_summary=parsed.summary,
        )

    def analyze_password(self, password: Optional[str]) -> PasswordAnalysis:
        """Rate a single credential without a configuration."""
        return self.password_analyzer.analyze(password)

    def _run_checks(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        """Run every check in order; a failing check contributes no findings."""
        issues: List[Issue] = []
        for check in self.checks:
            try:
                found = check.evaluate(lines, parsed)
            except Exception as e:
                logger.error(f"Security check '{check.name}' failed, skipping it: {e}", exc_info=True)
                continue
            logger.debug(f"Check '{check.name}' produced {len(found)} finding(s)")
            issues.extend(found)
        return issues


_default_analyzer: Optional[ConfigAnalyzer] = None


def get_default_analyzer() -> ConfigAnalyzer:
    """Analyzer built from application settings, created on first use."""
    global _default_analyzer
    if _default_analyzer is None:
        from app.core.config import get_settings
        _default_analyzer = ConfigAnalyzer(AnalyzerConfig.from_settings(get_settings()))
    return _default_analyzer


def analyze_configuration(config_text: Optional[str], password: Optional[str] = None) -> AnalysisResult:
    """Analyze configuration text with the default analyzer."""
    return get_default_analyzer().analyze(config_text, password)


def analyze_password(password: Optional[str]) -> PasswordAnalysis:
    """Rate a credential with the default analyzer."""
    return get_default_analyzer().analyze_password(password)
