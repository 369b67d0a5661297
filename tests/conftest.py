"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from confstash.adapters.codecs.json_codec import JsonCodec
from confstash.adapters.codecs.toml_codec import TomlCodec
from confstash.adapters.codecs.yaml_codec import YamlCodec
from confstash.core.manager import ConfigManager
from tests.helpers import FakePathProvider

CODECS = {
    "toml": TomlCodec,
    "yaml": YamlCodec,
    "json": JsonCodec,
}


@pytest.fixture
def config_home(tmp_path: Path) -> Path:
    """Directory standing in for the platform config directory."""
    home = tmp_path / "config-home"
    home.mkdir()
    return home


@pytest.fixture
def fake_provider(config_home: Path) -> FakePathProvider:
    """Path provider that places every application under config_home."""
    return FakePathProvider(config_home)


@pytest.fixture
def toml_manager(fake_provider: FakePathProvider) -> ConfigManager:
    """TOML ConfigManager isolated from the user's real config directory."""
    return ConfigManager(TomlCodec(), path_provider=fake_provider)


@pytest.fixture(params=sorted(CODECS))
def manager(request: pytest.FixtureRequest, fake_provider: FakePathProvider) -> ConfigManager:
    """ConfigManager for each supported format, isolated from real config dirs."""
    return ConfigManager(CODECS[request.param](), path_provider=fake_provider)
