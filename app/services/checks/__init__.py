"""Security checks run by the configuration analyzer, in report order."""
from typing import List, Optional

from app.services.analyzer_config import AnalyzerConfig
from app.services.checks.access_control import MissingAccessControlCheck, UnusedInterfaceCheck
from app.services.checks.base import SecurityCheck
from app.services.checks.best_practices import BestPracticeCheck
from app.services.checks.passwords import WeakPasswordCheck, extract_credential
from app.services.checks.services import InsecureServiceCheck

DEFAULT_CHECK_CLASSES = (
    WeakPasswordCheck,
    InsecureServiceCheck,
    MissingAccessControlCheck,
    UnusedInterfaceCheck,
    BestPracticeCheck,
)


def build_default_checks(config: Optional[AnalyzerConfig] = None) -> List[SecurityCheck]:
    """Instantiate the built-in checks in their fixed order."""
    config = config or AnalyzerConfig()
    return [check_class(config) for check_class in DEFAULT_CHECK_CLASSES]


__all__ = [
    "SecurityCheck",
    "WeakPasswordCheck",
    "InsecureServiceCheck",
    "MissingAccessControlCheck",
    "UnusedInterfaceCheck",
    "BestPracticeCheck",
    "DEFAULT_CHECK_CLASSES",
    "build_default_checks",
    "extract_credential",
]
