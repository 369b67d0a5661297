"""Config path resolution.

Maps an application name (and optional config name) to the file a config
lives in, creating the containing directory when needed. Nothing is cached:
every call asks the path provider again.
"""

import logging
from pathlib import Path

from confstash.domain.exceptions import PathResolutionError
from confstash.domain.paths import DEFAULT_CONFIG_NAME, DEFAULT_QUALIFIER, ResolvedPath
from confstash.ports.codecs import Codec
from confstash.ports.paths import PathProvider

logger = logging.getLogger(__name__)


def resolve(
    app_name: str,
    config_name: str | None,
    codec: Codec,
    provider: PathProvider,
    qualifier: str = DEFAULT_QUALIFIER,
    organization: str = "",
) -> ResolvedPath:
    """Resolve the OS-conventional location of a config file.

    Args:
        app_name: Application name
        config_name: Config file stem, or None for "default-config"
        codec: Active codec, supplies the file extension
        provider: Platform config directory lookup
        qualifier: Reverse-domain style namespace prefix
        organization: Organization name, may be empty

    Returns:
        ResolvedPath whose directory exists

    Raises:
        PathResolutionError: If the directory cannot be determined or created
    """
    if not app_name or not app_name.strip():
        raise PathResolutionError(
            "Application name must not be empty",
            hint="Pass the name of your application, e.g. load('my-app', MyConfig)",
        )

    try:
        directory = provider.config_dir(qualifier, organization, app_name)
    except PathResolutionError:
        raise
    except Exception as e:
        raise PathResolutionError(
            f"Could not determine the config directory for '{app_name}': {e}",
            cause=e,
        ) from e
    if not directory or not str(directory).strip():
        raise PathResolutionError(f"No config directory available for '{app_name}'")

    return resolve_custom(directory, config_name or DEFAULT_CONFIG_NAME, codec)


def resolve_custom(directory: Path, file_stem: str, codec: Codec) -> ResolvedPath:
    """Resolve a config file inside a caller-chosen directory.

    Args:
        directory: Directory to hold the config (created if missing)
        file_stem: File name without extension
        codec: Active codec, supplies the file extension

    Returns:
        ResolvedPath whose directory exists

    Raises:
        PathResolutionError: If the directory cannot be created
    """
    if not file_stem:
        raise PathResolutionError("Config name must not be empty", path=Path(directory))

    directory = ensure_directory(Path(directory))
    return ResolvedPath(directory=directory, file_name=f"{file_stem}.{codec.extension}")


def ensure_directory(directory: Path) -> Path:
    """Create a directory and its parents; succeed if it already exists.

    Raises:
        PathResolutionError: If creation fails (permissions, a file in the way)
    """
    if directory.is_dir():
        return directory

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PathResolutionError(
            f"Could not create config directory {directory}: {e.strerror or e}",
            path=directory,
            cause=e,
        ) from e

    logger.debug("Created config directory %s", directory)
    return directory
