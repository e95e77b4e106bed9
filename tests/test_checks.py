"""
Tests for the individual security checks.
"""
import pytest

from app.schemas.analysis import Severity
from app.services.analyzer_config import AnalyzerConfig
from app.services.checks import (
    BestPracticeCheck,
    InsecureServiceCheck,
    MissingAccessControlCheck,
    UnusedInterfaceCheck,
    WeakPasswordCheck,
    build_default_checks,
    extract_credential,
)
from app.utils.parsers.ios_parser import IOSConfigParser


def run_check(check, text):
    parser = IOSConfigParser(text)
    return check.evaluate(parser.lines, parser.parse())


def severities(issues):
    return [issue.severity for issue in issues]


class TestWeakPasswordCheck:
    """Weak, short and plaintext credentials."""

    def test_dictionary_password_is_critical_and_short(self):
        issues = run_check(WeakPasswordCheck(), "password cisco")

        assert severities(issues) == [Severity.CRITICAL, Severity.HIGH]
        assert all(issue.reference_id == "CWE-521" for issue in issues)
        assert all(issue.location == "Line 1" for issue in issues)
        assert issues[0].category == "Weak Authentication"
        assert "cisco" in issues[0].title

    def test_secret_on_username_line(self):
        issues = run_check(WeakPasswordCheck(), "hostname r1\nusername admin privilege 15 secret Kx93#vQz2mLp")

        assert severities(issues) == [Severity.CRITICAL, Severity.HIGH]
        assert '"admin"' in issues[0].title
        assert issues[0].location == "Line 2"

    def test_second_token_is_the_credential(self):
        issues = run_check(WeakPasswordCheck(), "username bob secret cisco")

        assert severities(issues) == [Severity.HIGH]
        assert "3 characters" in issues[0].description

    def test_short_password_not_in_dictionary(self):
        issues = run_check(WeakPasswordCheck(), "password Xy7#")

        assert severities(issues) == [Severity.HIGH]
        assert issues[0].title == "Password too short"

    def test_long_unlisted_password_passes(self):
        assert run_check(WeakPasswordCheck(), "password Kx93#vQz2mLp") == []

    def test_enable_password_is_plaintext(self):
        issues = run_check(WeakPasswordCheck(), "enable password Sup3rStrongPass")

        assert len(issues) == 1
        assert issues[0].severity == Severity.HIGH
        assert issues[0].reference_id == "CWE-256"
        assert issues[0].title == "Unencrypted enable password"

    def test_enable_secret_reads_second_token(self):
        issues = run_check(WeakPasswordCheck(), "enable secret 5 $1$mERr$hx5rVt7rPNoS4wqbXKX7m0")

        assert severities(issues) == [Severity.CRITICAL, Severity.HIGH]
        assert '"secret"' in issues[0].title

    def test_encryption_type_as_credential(self):
        issues = run_check(WeakPasswordCheck(), "password 7 0822455D0A16")

        assert severities(issues) == [Severity.HIGH]

    def test_comment_lines_are_scanned(self):
        issues = run_check(WeakPasswordCheck(), "! password cisco\n! enable secret cisco")

        assert severities(issues) == [Severity.HIGH]
        assert issues[0].location == "Line 2"

    def test_placeholder_tokens_are_ignored(self):
        assert run_check(WeakPasswordCheck(), "password <changeme>!") == []

    def test_keyword_credentials(self):
        check = WeakPasswordCheck(AnalyzerConfig(keyword_credentials=True))

        issues = run_check(check, "enable secret cisco")
        assert severities(issues) == [Severity.CRITICAL, Severity.HIGH]
        assert '"cisco"' in issues[0].title

        assert severities(run_check(check, "username bob secret cisco")) == [Severity.CRITICAL, Severity.HIGH]
        assert run_check(check, "password 7 0822455D0A16") == []
        assert run_check(check, "enable secret 5 $1$mERr$hx5rVt7rPNoS4wqbXKX7m0") == []

    def test_skip_comment_lines(self):
        check = WeakPasswordCheck(AnalyzerConfig(skip_comment_lines=True))

        assert run_check(check, "! password cisco\n! enable secret cisco") == []

    def test_case_insensitive_dictionary_by_default(self):
        issues = run_check(WeakPasswordCheck(), "password Cisco")

        assert Severity.CRITICAL in severities(issues)

    def test_case_sensitive_dictionary_policy(self):
        check = WeakPasswordCheck(AnalyzerConfig(weak_password_case_sensitive=True))
        issues = run_check(check, "password Cisco")

        assert severities(issues) == [Severity.HIGH]

    def test_custom_dictionary(self):
        check = WeakPasswordCheck(AnalyzerConfig(weak_passwords=("hunter2",)))

        assert severities(run_check(check, "password hunter2")) == [Severity.CRITICAL, Severity.HIGH]
        assert severities(run_check(check, "password cisco")) == [Severity.HIGH]


@pytest.mark.parametrize("text, expected", [
    ("password cisco", "cisco"),
    ("enable secret 5 $1$abc", "secret"),
    ("username bob secret 9 $9$xyz", "bob"),
    ("password 7", "7"),
    ("password", ""),
])
def test_extract_credential(text, expected):
    assert extract_credential(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("password cisco", "cisco"),
    ("enable secret 5 $1$abc", "$1$abc"),
    ("username bob secret 9 $9$xyz", "$9$xyz"),
    ("password 7", "7"),
    ("password", ""),
    ("mysecret value", ""),
])
def test_extract_credential_after_keyword(text, expected):
    assert extract_credential(text, after_keyword=True) == expected


class TestInsecureServiceCheck:
    """Telnet and HTTP management access."""

    @pytest.mark.parametrize("line", ["transport input telnet", "transport input all", "transport input telnet ssh"])
    def test_telnet_is_critical(self, line):
        issues = run_check(InsecureServiceCheck(), f"line vty 0 4\n {line}\n!")

        assert severities(issues) == [Severity.CRITICAL]
        assert issues[0].reference_id == "CWE-319"
        assert issues[0].location == "Line 2"

    def test_ssh_only_is_clean(self):
        assert run_check(InsecureServiceCheck(), "line vty 0 4\n transport input ssh\n!") == []

    def test_http_server_is_high(self):
        issues = run_check(InsecureServiceCheck(), "ip http server")

        assert severities(issues) == [Severity.HIGH]
        assert issues[0].category == "Insecure Service"

    @pytest.mark.parametrize("line", ["no ip http server", "ip http secure-server"])
    def test_disabled_or_secure_http_is_clean(self, line):
        assert run_check(InsecureServiceCheck(), line) == []

    def test_comment_lines_are_scanned(self):
        issues = run_check(InsecureServiceCheck(), "! ip http server\n! transport input telnet")

        assert severities(issues) == [Severity.HIGH, Severity.CRITICAL]

    def test_skip_comment_lines(self):
        check = InsecureServiceCheck(AnalyzerConfig(skip_comment_lines=True))

        assert run_check(check, "! ip http server\n! transport input telnet") == []


class TestMissingAccessControlCheck:
    """VTY access-class and interface ACL coverage."""

    def test_vty_without_access_class(self):
        issues = run_check(MissingAccessControlCheck(), "line vty 0 4\n password Kx93#vQz2mLp\n!")

        assert severities(issues) == [Severity.HIGH]
        assert issues[0].reference_id == "CWE-284"
        assert issues[0].location == "Line 1"
        assert "0 4" in issues[0].description

    def test_vty_with_access_class(self):
        assert run_check(MissingAccessControlCheck(), "line vty 0 4\n access-class 10 in\n!") == []

    def test_active_interface_without_acl(self):
        issues = run_check(MissingAccessControlCheck(), "!\ninterface Gi0/0\n no shutdown\n!")

        assert severities(issues) == [Severity.MEDIUM]
        assert issues[0].location == "Line 2"
        assert "Gi0/0" in issues[0].title

    def test_active_interface_with_acl(self):
        text = "interface Gi0/0\n ip access-group 101 in\n no shutdown\n!"
        assert run_check(MissingAccessControlCheck(), text) == []

    def test_inactive_interfaces_are_not_flagged(self):
        text = "interface Gi0/0\n shutdown\n!\ninterface Gi0/1\n!"
        assert run_check(MissingAccessControlCheck(), text) == []


class TestUnusedInterfaceCheck:
    """Shutdown and unconfigured interfaces."""

    def test_one_low_issue_per_unused_interface(self):
        text = "interface Gi0/0\n shutdown\n!\ninterface Gi0/1\n!\ninterface Gi0/2\n no shutdown\n!"
        issues = run_check(UnusedInterfaceCheck(), text)

        assert severities(issues) == [Severity.LOW, Severity.LOW]
        assert [issue.location for issue in issues] == ["Line 1", "Line 4"]
        assert all(issue.reference_id == "N/A" for issue in issues)
        assert all(issue.category == "Configuration Optimization" for issue in issues)


class TestBestPracticeCheck:
    """Whole-document hardening directives."""

    def test_empty_document_has_no_findings(self):
        assert run_check(BestPracticeCheck(), "") == []
        assert run_check(BestPracticeCheck(), "  \n\n ") == []

    def test_bare_config_flags_everything(self):
        issues = run_check(BestPracticeCheck(), "hostname r1")

        assert [issue.title for issue in issues] == [
            "SSH not configured",
            "No login banner",
            "Logging not configured",
            "Password encryption disabled",
        ]
        assert severities(issues) == [Severity.HIGH, Severity.LOW, Severity.MEDIUM, Severity.MEDIUM]
        assert all(issue.location == "Global configuration" for issue in issues)

    def test_basic_variant_only_checks_ssh(self):
        check = BestPracticeCheck(AnalyzerConfig(extended_best_practices=False))
        issues = run_check(check, "hostname r1")

        assert [issue.title for issue in issues] == ["SSH not configured"]

    def test_hardened_config_is_clean(self, hardened_config):
        assert run_check(BestPracticeCheck(), hardened_config) == []


def test_default_checks_order():
    checks = build_default_checks()

    assert [type(check) for check in checks] == [
        WeakPasswordCheck,
        InsecureServiceCheck,
        MissingAccessControlCheck,
        UnusedInterfaceCheck,
        BestPracticeCheck,
    ]


def test_default_checks_share_config():
    config = AnalyzerConfig(extended_best_practices=False)
    checks = build_default_checks(config)

    assert all(check.config is config for check in checks)
