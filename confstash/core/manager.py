"""Public config operations bound to one codec.

A ConfigManager pairs a codec with a path provider and exposes the
load/store operations. It holds no mutable state; the binding modules
(confstash.toml_conf, confstash.yaml_conf, confstash.json_conf) each create
one at import time.
"""

from pathlib import Path
from typing import Any, TypeVar

from confstash.core.engine import load_file, store_file
from confstash.core.resolver import ensure_directory, resolve
from confstash.domain.paths import DEFAULT_QUALIFIER
from confstash.ports.codecs import Codec
from confstash.ports.paths import PathProvider

T = TypeVar("T")


class ConfigManager:
    """Load and store dataclass configs in one file format.

    Example:
        manager = ConfigManager(TomlCodec())
        cfg = manager.load("my-app", MyConfig)
        manager.store("my-app", replace(cfg, version=2))
    """

    def __init__(
        self,
        codec: Codec,
        path_provider: PathProvider | None = None,
        qualifier: str = DEFAULT_QUALIFIER,
        organization: str = "",
    ) -> None:
        """Initialize the manager.

        Args:
            codec: Format every config is read and written in
            path_provider: Platform config directory lookup (defaults to
                PlatformDirsProvider)
            qualifier: Reverse-domain style namespace prefix
            organization: Organization name used in the namespace
        """
        if path_provider is None:
            from confstash.adapters.paths.platform_dirs import PlatformDirsProvider

            path_provider = PlatformDirsProvider()

        self.codec = codec
        self.path_provider = path_provider
        self.qualifier = qualifier
        self.organization = organization

    def get_configuration_file_path(self, app_name: str, config_name: str | None = None) -> Path:
        """Return the file an application's config is stored in.

        The containing directory is created if it does not exist.

        Raises:
            PathResolutionError: If the directory cannot be determined or created
        """
        resolved = resolve(
            app_name,
            config_name,
            self.codec,
            self.path_provider,
            qualifier=self.qualifier,
            organization=self.organization,
        )
        return resolved.path

    def load(self, app_name: str, config_type: type[T], config_name: str | None = None) -> T:
        """Load an application's config from the OS-conventional location.

        On first run the file does not exist yet: the default config is
        written there and returned.

        Args:
            app_name: Application name
            config_type: Dataclass type of the config
            config_name: Config file stem, defaults to "default-config"

        Returns:
            The stored config, or the default config on first run

        Raises:
            PathResolutionError: If the config directory is unavailable
            IoFailureError: If the file exists but cannot be read
            BadConfigError: If the file contents do not match config_type
        """
        return load_file(self.get_configuration_file_path(app_name, config_name), config_type, self.codec)

    def load_path(self, path: str | Path, config_type: type[T]) -> T:
        """Load a config from an explicit file path.

        Same first-run and error behavior as load(); no platform lookup.
        The parent directory is created if missing.
        """
        path = Path(path)
        ensure_directory(path.parent)
        return load_file(path, config_type, self.codec)

    def store(self, app_name: str, value: Any, config_name: str | None = None) -> None:
        """Write an application's config to the OS-conventional location.

        Raises:
            PathResolutionError: If the config directory is unavailable
            IoFailureError: If the file cannot be written
            BadConfigError: If the value cannot be serialized
        """
        store_file(self.get_configuration_file_path(app_name, config_name), value, self.codec)

    def store_path(self, path: str | Path, value: Any) -> None:
        """Write a config to an explicit file path, creating its directory."""
        path = Path(path)
        ensure_directory(path.parent)
        store_file(path, value, self.codec)

    def store_path_perms(self, path: str | Path, value: Any, mode: int) -> None:
        """Write a config to an explicit file path with the given permission bits.

        Use this for configs holding secrets, e.g. ``mode=0o600``. On Windows
        only the read-only bit of ``mode`` has an effect.
        """
        path = Path(path)
        ensure_directory(path.parent)
        store_file(path, value, self.codec, mode=mode)
