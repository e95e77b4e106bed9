"""
Cleartext management service detection.
"""
from typing import List

from app.schemas.analysis import Issue, Severity
from app.services.checks.base import SecurityCheck
from app.utils.parsers.config_models import ConfigLine, ParsedConfig

CATEGORY = "Insecure Service"

TELNET_PATTERNS = ("transport input telnet", "transport input all")


class InsecureServiceCheck(SecurityCheck):
    """Flags Telnet on VTY lines and the plain HTTP admin server."""

    name = "insecure_services"

    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        issues = []

        for line in lines:
            if self.skips(line):
                continue
            text = line.text

            if any(pattern in text for pattern in TELNET_PATTERNS):
                issues.append(self.issue(
                    Severity.CRITICAL,
                    CATEGORY,
                    "Telnet enabled",
                    f"{line.location}: Telnet (port 23) is enabled and sends credentials in plaintext.",
                    line.location,
                    "Use SSH instead of Telnet.",
                    "CWE-319",
                ))

            if "ip http server" in text and not text.startswith("no "):
                issues.append(self.issue(
                    Severity.HIGH,
                    CATEGORY,
                    "HTTP server enabled",
                    f"{line.location}: HTTP (port 80) is enabled for device administration.",
                    line.location,
                    'Use HTTPS instead ("no ip http server" / "ip http secure-server").',
                    "CWE-319",
                ))

        return issues
