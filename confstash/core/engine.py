"""Config load/store engine.

Reads a config file into a dataclass, writing the type's default first when
the file does not exist, and writes dataclass values back to disk. The engine
keeps no state between calls and is handed the codec to use; it never decides
the format itself.

Writes truncate the target in place. A failure partway through a write can
leave a truncated file behind.
"""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from confstash.domain.exceptions import BadConfigError, IoFailureError
from confstash.domain.values import default_instance, from_data, to_data
from confstash.ports.codecs import Codec, CodecError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_file(path: Path, config_type: type[T], codec: Codec) -> T:
    """Load a config file, creating it with defaults if it is missing.

    Args:
        path: Config file path
        config_type: Dataclass type to decode into
        codec: Codec the file is written in

    Returns:
        Decoded config, or the default config if the file did not exist

    Raises:
        IoFailureError: If the file exists but cannot be opened or read
        BadConfigError: If the contents cannot be decoded into config_type
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        value = _build_default(config_type, path)
        logger.debug("No config at %s, writing defaults", path)
        store_file(path, value, codec)
        return value
    except UnicodeDecodeError as e:
        raise BadConfigError(
            f"Config file {path} is not valid UTF-8 text: {e}",
            path=path,
            cause=e,
        ) from e
    except OSError as e:
        raise IoFailureError(
            f"Could not read config file {path}: {e.strerror or e}",
            path=path,
            cause=e,
        ) from e

    try:
        data = codec.deserialize(text)
        value = from_data(config_type, data)
    except (CodecError, TypeError, ValueError) as e:
        raise BadConfigError(
            f"Bad {codec.name.upper()} data in {path}: {e}",
            path=path,
            cause=e,
            hint="Fix the file by hand or delete it to regenerate the defaults",
        ) from e

    logger.debug("Loaded config from %s", path)
    return value


def store_file(path: Path, value: Any, codec: Codec, mode: int | None = None) -> None:
    """Serialize a config value and write it to a file.

    The value is serialized before the file is opened, so an unencodable
    value leaves any existing file untouched.

    Args:
        path: Config file path; the parent directory must exist
        value: Dataclass instance to store
        codec: Codec to write with
        mode: Optional permission bits applied to the file (e.g. 0o600)

    Raises:
        BadConfigError: If the value cannot be serialized
        IoFailureError: If the file cannot be opened, written or flushed
    """
    if not (dataclasses.is_dataclass(value) and not isinstance(value, type)):
        raise BadConfigError(
            f"Could not serialize config for {path}: expected a dataclass instance, "
            f"got {type(value).__name__}",
            path=path,
        )

    try:
        text = codec.serialize(to_data(value, keep_none=codec.supports_null))
    except (CodecError, TypeError) as e:
        raise BadConfigError(
            f"Could not serialize config for {path}: {e}",
            path=path,
            cause=e,
        ) from e

    def opener(file: str | Path, flags: int) -> int:
        if mode is None:
            return os.open(file, flags)
        return os.open(file, flags, mode)

    try:
        with open(path, "w", encoding="utf-8", newline="", opener=opener) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if mode is not None:
            # os.open skips existing files and applies the umask
            os.chmod(path, mode)
    except OSError as e:
        raise IoFailureError(
            f"Could not write config file {path}: {e.strerror or e}",
            path=path,
            cause=e,
        ) from e

    logger.debug("Stored config to %s", path)


def _build_default(config_type: type[T], path: Path) -> T:
    try:
        return default_instance(config_type)
    except (TypeError, ValueError) as e:
        raise BadConfigError(
            f"Could not build a default {getattr(config_type, '__name__', config_type)}: {e}",
            path=path,
            cause=e,
            hint="Give every field a default value or define a default() classmethod",
        ) from e
