"""
Weak and plaintext credential detection.
"""
from typing import List

from app.schemas.analysis import Issue, Severity
from app.services.checks.base import SecurityCheck
from app.utils.parsers.config_models import ConfigLine, ParsedConfig

CATEGORY = "Weak Authentication"

CREDENTIAL_KEYWORDS = ("password", "secret")

# IOS encryption type markers, e.g. "password 7 <hash>" or "secret 5 <hash>"
ENCRYPTION_TYPES = {"0", "5", "7", "8", "9"}


def extract_credential(text: str, after_keyword: bool = False) -> str:
    """
    Return the credential on a password/secret line.

    By default this is the line's second whitespace token. With
    ``after_keyword`` it is the token following the password/secret keyword,
    skipping an encryption type digit when a value follows it. Returns an
    empty string if there is no such token.
    """
    parts = text.split()
    if not after_keyword:
        return parts[1] if len(parts) > 1 else ""

    for index, part in enumerate(parts):
        if part in CREDENTIAL_KEYWORDS:
            rest = parts[index + 1:]
            if len(rest) > 1 and rest[0] in ENCRYPTION_TYPES:
                return rest[1]
            return rest[0] if rest else ""
    return ""


class WeakPasswordCheck(SecurityCheck):
    """Flags dictionary, short and plaintext enable passwords."""

    name = "weak_passwords"

    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        issues = []

        for line in lines:
            if self.skips(line):
                continue
            text = line.text

            if text.startswith("password ") or "secret " in text:
                password = extract_credential(text, self.config.keyword_credentials)
                # Placeholders such as "<secret>!" in annotated dumps are not credentials
                if password and "!" not in password:
                    issues.extend(self._credential_issues(line, password))

            if text.startswith("enable password "):
                issues.append(self.issue(
                    Severity.HIGH,
                    CATEGORY,
                    "Unencrypted enable password",
                    f'{line.location}: Using "enable password" stores password in plain text.',
                    line.location,
                    'Use "enable secret" instead.',
                    "CWE-256",
                ))

        return issues

    def _credential_issues(self, line: ConfigLine, password: str) -> List[Issue]:
        issues = []

        if self.config.is_weak_password(password):
            issues.append(self.issue(
                Severity.CRITICAL,
                CATEGORY,
                f'Weak password detected: "{password}"',
                f'{line.location}: Found weak or default password "{password}".',
                line.location,
                "Use a strong password with at least 12 characters.",
                "CWE-521",
            ))

        if len(password) < self.config.min_password_length:
            issues.append(self.issue(
                Severity.HIGH,
                CATEGORY,
                "Password too short",
                f"{line.location}: Password is only {len(password)} characters.",
                line.location,
                "Use passwords with at least 8-12 characters.",
                "CWE-521",
            ))

        return issues
