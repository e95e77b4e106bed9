"""
Whole-document hardening checks.
"""
from typing import List

from app.schemas.analysis import Issue, Severity
from app.services.checks.base import SecurityCheck
from app.utils.parsers.config_models import ConfigLine, ParsedConfig

CATEGORY = "Security Best Practice"
LOCATION = "Global configuration"


class BestPracticeCheck(SecurityCheck):
    """Flags hardening directives that are absent from the whole configuration."""

    name = "best_practices"

    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        config_text = "\n".join(line.text for line in lines)
        # Nothing to judge; absence checks would flag every empty document
        if not config_text.strip():
            return []

        issues = []

        if "transport input ssh" not in config_text:
            issues.append(self.issue(
                Severity.HIGH,
                CATEGORY,
                "SSH not configured",
                "SSH is not configured for remote access.",
                LOCATION,
                "Configure SSH for secure remote access (transport input ssh).",
            ))

        if not self.config.extended_best_practices:
            return issues

        if "banner" not in config_text:
            issues.append(self.issue(
                Severity.LOW,
                CATEGORY,
                "No login banner",
                "No banner is configured to warn against unauthorized access.",
                LOCATION,
                "Configure a legal warning with banner motd or banner login.",
            ))

        if "logging" not in config_text:
            issues.append(self.issue(
                Severity.MEDIUM,
                CATEGORY,
                "Logging not configured",
                "No logging destination is configured, which limits incident investigation.",
                LOCATION,
                "Send logs to a syslog server (logging host) and enable buffered logging.",
                "CWE-778",
            ))

        if "service password-encryption" not in config_text:
            issues.append(self.issue(
                Severity.MEDIUM,
                CATEGORY,
                "Password encryption disabled",
                "service password-encryption is not enabled, so type 0 passwords are shown in plain text.",
                LOCATION,
                "Enable service password-encryption.",
                "CWE-256",
            ))

        return issues
