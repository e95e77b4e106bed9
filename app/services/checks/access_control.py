"""
Checks based on the parsed interface and VTY blocks.
"""
from typing import List

from app.schemas.analysis import Issue, Severity
from app.services.checks.base import SecurityCheck
from app.utils.parsers.config_models import ConfigLine, InterfaceStatus, ParsedConfig


class MissingAccessControlCheck(SecurityCheck):
    """Flags VTY lines without access-class and active interfaces without an ACL."""

    name = "missing_access_control"
    category = "Missing Access Control"

    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        issues = []

        for vty in parsed.vty_lines:
            if not vty.access_class:
                issues.append(self.issue(
                    Severity.HIGH,
                    self.category,
                    "No access-class on VTY line",
                    f"VTY line {vty.range} has no access-class configured, "
                    "so remote management is reachable from any source.",
                    f"Line {vty.line_number}",
                    "Configure an access-class to restrict management sources.",
                    "CWE-284",
                ))

        for interface in parsed.interfaces:
            if interface.status is InterfaceStatus.ACTIVE and not interface.acl:
                issues.append(self.issue(
                    Severity.MEDIUM,
                    self.category,
                    f"No ACL on interface {interface.name}",
                    f"Interface {interface.name} has no access control list.",
                    f"Line {interface.line_number}",
                    "Consider adding an ACL with ip access-group.",
                    "CWE-284",
                ))

        return issues


class UnusedInterfaceCheck(SecurityCheck):
    """Informational finding for interfaces that are shut down or left unconfigured."""

    name = "unused_interfaces"

    def evaluate(self, lines: List[ConfigLine], parsed: ParsedConfig) -> List[Issue]:
        return [
            self.issue(
                Severity.LOW,
                "Configuration Optimization",
                f"Unused interface: {interface.name}",
                f"Interface {interface.name} is shutdown or not configured.",
                f"Line {interface.line_number}",
                "Ensure interface is properly shutdown if not needed.",
            )
            for interface in parsed.interfaces
            if interface.status in (InterfaceStatus.SHUTDOWN, InterfaceStatus.UNKNOWN)
        ]
