"""Load and store an application's config file in the OS-conventional location.

The top-level functions read and write TOML. For another format import the
matching binding module instead (confstash.yaml_conf, confstash.json_conf).
"""

from confstash.core.manager import ConfigManager
from confstash.domain.exceptions import (
    BadConfigError,
    ConfstashError,
    ErrorKind,
    IoFailureError,
    PathResolutionError,
)
from confstash.domain.paths import DEFAULT_CONFIG_NAME, ResolvedPath
from confstash.toml_conf import (
    get_configuration_file_path,
    load,
    load_path,
    store,
    store_path,
    store_path_perms,
)
from confstash.version import __version__

__all__ = [
    "BadConfigError",
    "ConfigManager",
    "ConfstashError",
    "DEFAULT_CONFIG_NAME",
    "ErrorKind",
    "IoFailureError",
    "PathResolutionError",
    "ResolvedPath",
    "__version__",
    "get_configuration_file_path",
    "load",
    "load_path",
    "store",
    "store_path",
    "store_path_perms",
]
