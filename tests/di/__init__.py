"""Mock providers for testing."""

from .config import MockConfigProvider, make_test_settings
from .container import build_test_container

__all__ = [
    "MockConfigProvider",
    "build_test_container",
    "make_test_settings",
]
