"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from app.main import app
from app.services.analysis_service import ConfigAnalyzer
from app.services.analyzer_config import AnalyzerConfig


# Router with the classic weaknesses: dictionary VTY password, Telnet,
# plaintext enable password, HTTP server, unprotected interfaces
SAMPLE_INSECURE_CONFIG = """hostname lab-router
!
enable password cisco
!
interface GigabitEthernet0/0
 ip address 203.0.113.1 255.255.255.0
 no shutdown
!
interface GigabitEthernet0/1
 ip address 192.168.1.1 255.255.255.0
 shutdown
!
interface GigabitEthernet0/2
!
ip http server
!
access-list 10 permit 192.168.1.0 0.0.0.255
!
line vty 0 4
 password cisco
 transport input telnet
!
end
"""

# Hardened router: SSH only, ACLs everywhere, logging, banner, encryption
SAMPLE_HARDENED_CONFIG = """hostname core-router
!
service password-encryption
!
banner motd ^C Authorized access only ^C
logging host 10.0.0.50
!
interface GigabitEthernet0/0
 ip address 203.0.113.1 255.255.255.0
 ip access-group 101 in
 no shutdown
!
no ip http server
!
access-list 10 permit 10.0.0.0 0.0.0.255
access-list 101 deny ip any any log
!
line vty 0 4
 access-class 10 in
 transport input ssh
!
end
"""


@pytest.fixture(scope="function", autouse=True)
def disable_api_key():
    """Disable API key authentication for all tests."""
    with patch("app.core.config.settings.API_KEY", None):
        yield


@pytest.fixture(scope="function")
def client():
    """Test client with authentication disabled."""
    yield TestClient(app)


@pytest.fixture(scope="function")
def client_with_auth():
    """
    Test client with API key authentication enabled.

    Sets API_KEY="test-key" for testing authentication.
    """
    with patch("app.core.config.settings.API_KEY", "test-key"):
        yield TestClient(app)


@pytest.fixture
def insecure_config():
    return SAMPLE_INSECURE_CONFIG


@pytest.fixture
def hardened_config():
    return SAMPLE_HARDENED_CONFIG


@pytest.fixture
def analyzer_config():
    """Default analyzer configuration."""
    return AnalyzerConfig()


@pytest.fixture
def analyzer(analyzer_config):
    """Analyzer with the built-in checks."""
    return ConfigAnalyzer(analyzer_config)
