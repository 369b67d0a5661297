"""Unit tests for ConfigManager and the codec binding modules."""

import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import confstash
from confstash import json_conf, toml_conf, yaml_conf
from confstash.adapters.codecs.json_codec import JsonCodec
from confstash.adapters.codecs.toml_codec import TomlCodec
from confstash.adapters.codecs.yaml_codec import YamlCodec
from confstash.adapters.paths.platform_dirs import PlatformDirsProvider
from confstash.core.manager import ConfigManager
from confstash.domain.exceptions import PathResolutionError
from tests.helpers import AppConfig, FakePathProvider


class TestConstruction:
    """Tests for ConfigManager construction."""

    def test_defaults_to_platformdirs_provider(self) -> None:
        """Test that the platform provider is used when none is given."""
        manager = ConfigManager(TomlCodec())

        assert isinstance(manager.path_provider, PlatformDirsProvider)
        assert manager.qualifier == "py"
        assert manager.organization == ""

    def test_namespace_settings_reach_provider(self, fake_provider: FakePathProvider) -> None:
        """Test that qualifier and organization are passed through on every call."""
        manager = ConfigManager(TomlCodec(), fake_provider, qualifier="com", organization="Acme")

        manager.get_configuration_file_path("my-app")
        manager.get_configuration_file_path("my-app", "other")

        assert fake_provider.calls == [("com", "Acme", "my-app"), ("com", "Acme", "my-app")]


class TestProviderFailures:
    """Tests for path provider failures reaching the public operations."""

    @pytest.mark.parametrize("operation", ["load", "store"])
    def test_provider_exception_surfaces_as_path_resolution_error(
        self, fake_provider: FakePathProvider, operation: str
    ) -> None:
        """Test that load and store never leak a raw provider exception."""
        manager = ConfigManager(TomlCodec(), path_provider=fake_provider)
        call = {
            "load": lambda: manager.load("my-app", AppConfig),
            "store": lambda: manager.store("my-app", AppConfig()),
        }[operation]

        with patch.object(fake_provider, "config_dir", side_effect=ValueError("no dirs")):
            with pytest.raises(PathResolutionError) as exc_info:
                call()

        assert isinstance(exc_info.value.cause, ValueError)


class TestGetConfigurationFilePath:
    """Tests for get_configuration_file_path."""

    def test_default_name(self, toml_manager: ConfigManager, config_home: Path) -> None:
        """Test the path of an application's default config."""
        path = toml_manager.get_configuration_file_path("my-app")

        assert path == config_home / "my-app" / "default-config.toml"
        assert path.parent.is_dir()
        assert not path.exists()

    def test_named_config(self, toml_manager: ConfigManager, config_home: Path) -> None:
        """Test the path of a named config."""
        path = toml_manager.get_configuration_file_path("my-app", "work")

        assert path == config_home / "my-app" / "work.toml"


class TestExplicitPaths:
    """Tests for load_path, store_path and store_path_perms."""

    def test_load_path_creates_parent_and_defaults(
        self, toml_manager: ConfigManager, fake_provider: FakePathProvider, tmp_path: Path
    ) -> None:
        """Test that load_path writes defaults into a new directory without lookups."""
        path = tmp_path / "custom" / "dir" / "settings.toml"

        result = toml_manager.load_path(path, AppConfig)

        assert result == AppConfig()
        assert path.is_file()
        assert fake_provider.calls == []

    def test_store_path_accepts_strings(self, toml_manager: ConfigManager, tmp_path: Path) -> None:
        """Test that string paths are accepted."""
        path = tmp_path / "new" / "settings.toml"

        toml_manager.store_path(str(path), AppConfig(version=2))

        assert toml_manager.load_path(str(path), AppConfig) == AppConfig(version=2)

    def test_store_path_unwritable_parent_raises(
        self, toml_manager: ConfigManager, tmp_path: Path
    ) -> None:
        """Test that a parent directory that cannot be created is a path error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(PathResolutionError):
            toml_manager.store_path(blocker / "settings.toml", AppConfig())

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_store_path_perms(self, toml_manager: ConfigManager, tmp_path: Path) -> None:
        """Test that configs holding secrets can be restricted to the owner."""
        path = tmp_path / "secrets.toml"

        toml_manager.store_path_perms(path, AppConfig(api_key="hunter2"), 0o600)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert toml_manager.load_path(path, AppConfig).api_key == "hunter2"


class TestBindings:
    """Tests for the codec binding modules."""

    @pytest.mark.parametrize(
        "module, codec_cls",
        [(toml_conf, TomlCodec), (yaml_conf, YamlCodec), (json_conf, JsonCodec)],
    )
    def test_each_binding_fixes_one_codec(self, module, codec_cls) -> None:
        """Test that each binding module is bound to exactly its own codec."""
        assert isinstance(module.CODEC, codec_cls)
        assert module.manager.codec is module.CODEC

    def test_top_level_functions_use_toml(self) -> None:
        """Test that the package-level API is the TOML binding."""
        assert confstash.load == toml_conf.load
        assert confstash.store == toml_conf.store
        assert confstash.load_path == toml_conf.load_path
        assert confstash.store_path == toml_conf.store_path

    def test_bound_functions_follow_manager_provider(self, fake_provider: FakePathProvider) -> None:
        """Test that swapping the binding's provider redirects its functions."""
        with patch.object(yaml_conf.manager, "path_provider", fake_provider):
            yaml_conf.store("bound-app", AppConfig(version=5))
            result = yaml_conf.load("bound-app", AppConfig)

        assert result == AppConfig(version=5)
        assert (fake_provider.base / "bound-app" / "default-config.yaml").is_file()
