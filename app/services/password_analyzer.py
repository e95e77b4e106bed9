"""
Password strength analysis for router credentials.
"""
import logging
import re
from typing import List, Optional

from app.schemas.analysis import Issue, PasswordAnalysis, PasswordStrength, Severity
from app.services.analyzer_config import AnalyzerConfig

logger = logging.getLogger(__name__)

CATEGORY = "Weak Authentication"
LOCATION = "Router Authentication"
REFERENCE = "CWE-521"

MIXED_CLASS_PATTERNS = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)


def _credential_issue(severity: Severity, title: str, description: str, recommendation: str) -> Issue:
    return Issue(
        severity=severity,
        category=CATEGORY,
        title=title,
        description=description,
        location=LOCATION,
        recommendation=recommendation,
        reference_id=REFERENCE,
    )


class PasswordAnalyzer:
    """Evaluates a single candidate credential."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def analyze(self, password: Optional[str]) -> PasswordAnalysis:
        """
        Rate a credential.

        Empty input and dictionary passwords are rated CRITICAL immediately.
        Otherwise length, character-class and common-word findings are
        collected and the strength tier is derived from the worst of them.

        Args:
            password: Candidate credential (may be None or empty)

        Returns:
            PasswordAnalysis with strength, score and findings
        """
        if not password:
            return PasswordAnalysis(
                strength=PasswordStrength.CRITICAL,
                score=0,
                issues=[_credential_issue(
                    Severity.CRITICAL,
                    "No password provided",
                    "Router authentication password is empty or not provided.",
                    "Always use a strong password for router access.",
                )],
            )

        if self.config.is_weak_password(password, case_sensitive=False):
            return PasswordAnalysis(
                strength=PasswordStrength.CRITICAL,
                score=10,
                issues=[_credential_issue(
                    Severity.CRITICAL,
                    f'Very weak password detected: "{password}"',
                    f'The password "{password}" is a commonly used weak password that is easily guessable.',
                    "Use a strong password with at least 12 characters, including uppercase, "
                    "lowercase, numbers, and symbols.",
                )],
            )

        issues = self._collect_issues(password)
        strength, score = self._rate(password, issues)
        logger.debug(f"Password rated {strength.value} ({score}) with {len(issues)} issue(s)")
        return PasswordAnalysis(strength=strength, score=score, issues=issues)

    def _collect_issues(self, password: str) -> List[Issue]:
        issues = []
        length = len(password)
        min_length = self.config.min_password_length
        recommended = self.config.recommended_password_length

        if length < min_length:
            issues.append(_credential_issue(
                Severity.CRITICAL,
                "Password too short",
                f"Password is only {length} characters. Short passwords are easily cracked.",
                f"Use passwords with at least {recommended}-16 characters for better security.",
            ))
        elif length < recommended:
            issues.append(_credential_issue(
                Severity.HIGH,
                "Password should be longer",
                f"Password is {length} characters. Consider using {recommended}+ characters for better security.",
                f"Use passwords with at least {recommended}-16 characters.",
            ))

        if password.isascii() and password.isdigit():
            issues.append(_credential_issue(
                Severity.HIGH,
                "Password contains only numbers",
                "Password consists only of numbers, making it easier to crack.",
                "Use a mix of uppercase, lowercase, numbers, and special characters.",
            ))

        if re.fullmatch(r"[A-Za-z]+", password):
            issues.append(_credential_issue(
                Severity.HIGH,
                "Password contains only letters",
                "Password consists only of letters, making it easier to crack.",
                "Use a mix of uppercase, lowercase, numbers, and special characters.",
            ))

        lowered = password.lower()
        if any(word.lower() in lowered for word in self.config.common_words):
            issues.append(_credential_issue(
                Severity.HIGH,
                "Password contains common words",
                "Password contains common dictionary words, making it vulnerable to dictionary attacks.",
                "Avoid using common words. Use a combination of random words or a passphrase.",
            ))

        return issues

    def _rate(self, password: str, issues: List[Issue]) -> tuple:
        severities = {issue.severity for issue in issues}
        if Severity.CRITICAL in severities:
            return PasswordStrength.CRITICAL, 20
        if Severity.HIGH in severities:
            return PasswordStrength.WEAK, 40
        if len(password) >= self.config.recommended_password_length:
            if all(pattern.search(password) for pattern in MIXED_CLASS_PATTERNS):
                return PasswordStrength.STRONG, 100
            return PasswordStrength.MODERATE, 70
        return PasswordStrength.STRONG, 100


def analyze_password_strength(password: Optional[str], config: Optional[AnalyzerConfig] = None) -> PasswordAnalysis:
    """Rate a credential with the given (or default) analyzer config."""
    return PasswordAnalyzer(config).analyze(password)
