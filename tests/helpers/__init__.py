"""Test helpers for confstash tests."""

from tests.helpers.configs import (
    AppConfig,
    FakePathProvider,
    LimitsConfig,
    RequiredConfig,
    RichConfig,
    ServerConfig,
    Theme,
    WindowConfig,
)

__all__ = [
    "AppConfig",
    "FakePathProvider",
    "LimitsConfig",
    "RequiredConfig",
    "RichConfig",
    "ServerConfig",
    "Theme",
    "WindowConfig",
]
