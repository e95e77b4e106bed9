"""
Tunable data used by the configuration analyzer.

Dictionaries and scoring tables are carried by an AnalyzerConfig instance
that is handed to the analyzer and its checks, so tests and callers can swap
in their own word lists or weights.
"""
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.analysis import PasswordStrength

# Default and vendor-shipped credentials seen on real devices
DEFAULT_WEAK_PASSWORDS: Tuple[str, ...] = (
    "cisco", "admin", "password", "123456", "letmein",
    "welcome", "default", "secret", "changeme", "12345",
    "1234", "12345678", "qwerty", "abc123", "password123",
    "admin123", "root", "user", "pass", "123",
)

# Substrings that make a longer password guessable by dictionary attack
DEFAULT_COMMON_WORDS: Tuple[str, ...] = (
    "password", "admin", "root", "user", "login", "welcome",
)


class PenaltyWeights(BaseModel):
    """Starting score and per-finding deductions for one scoring tier."""
    model_config = ConfigDict(frozen=True)

    base: int
    critical: int
    high: int
    medium: int
    low: int


DEFAULT_WEIGHTS = PenaltyWeights(base=100, critical=15, high=10, medium=5, low=2)

# A weaker credential lowers the ceiling and makes every further finding cheaper
DEFAULT_STRENGTH_WEIGHTS: Dict[PasswordStrength, PenaltyWeights] = {
    PasswordStrength.CRITICAL: PenaltyWeights(base=20, critical=5, high=3, medium=2, low=1),
    PasswordStrength.WEAK: PenaltyWeights(base=40, critical=8, high=5, medium=3, low=1),
    PasswordStrength.MODERATE: PenaltyWeights(base=70, critical=12, high=8, medium=4, low=2),
    PasswordStrength.STRONG: PenaltyWeights(base=100, critical=15, high=10, medium=5, low=2),
}


class AnalyzerConfig(BaseModel):
    """Capability object holding the analyzer's dictionaries and tables."""
    model_config = ConfigDict(frozen=True)

    weak_passwords: Tuple[str, ...] = DEFAULT_WEAK_PASSWORDS
    common_words: Tuple[str, ...] = DEFAULT_COMMON_WORDS
    min_password_length: int = 8
    recommended_password_length: int = 12
    weak_password_case_sensitive: bool = False
    extended_best_practices: bool = True
    # Read the value after the password/secret keyword instead of the second token
    keyword_credentials: bool = False
    skip_comment_lines: bool = False
    default_weights: PenaltyWeights = DEFAULT_WEIGHTS
    strength_weights: Dict[PasswordStrength, PenaltyWeights] = Field(
        default_factory=lambda: dict(DEFAULT_STRENGTH_WEIGHTS)
    )

    @classmethod
    def from_settings(cls, settings) -> "AnalyzerConfig":
        """Build a config from application Settings."""
        return cls(
            weak_password_case_sensitive=settings.WEAK_PASSWORD_CASE_SENSITIVE,
            extended_best_practices=settings.EXTENDED_BEST_PRACTICES,
            keyword_credentials=settings.KEYWORD_CREDENTIALS,
            skip_comment_lines=settings.SKIP_COMMENT_LINES,
        )

    def is_weak_password(self, candidate: str, case_sensitive: Optional[bool] = None) -> bool:
        """
        Check a credential against the weak-password dictionary.

        Args:
            candidate: Credential to look up
            case_sensitive: Override the configured matching policy

        Returns:
            True if the credential is a dictionary entry
        """
        if case_sensitive is None:
            case_sensitive = self.weak_password_case_sensitive
        if case_sensitive:
            return candidate in self.weak_passwords
        lowered = candidate.lower()
        return any(lowered == entry.lower() for entry in self.weak_passwords)

    def weights_for(self, strength: Optional[PasswordStrength]) -> PenaltyWeights:
        """Scoring tier for a password strength (None means no password supplied)."""
        if strength is None:
            return self.default_weights
        return self.strength_weights.get(strength, self.default_weights)
