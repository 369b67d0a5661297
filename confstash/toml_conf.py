"""Config operations reading and writing TOML (the default format).

Import this module to fix the config format for your application::

    from confstash import toml_conf

    cfg = toml_conf.load("my-app", MyConfig)
"""

from confstash.adapters.codecs.toml_codec import TomlCodec
from confstash.core.manager import ConfigManager

CODEC = TomlCodec()

manager = ConfigManager(CODEC)

load = manager.load
load_path = manager.load_path
store = manager.store
store_path = manager.store_path
store_path_perms = manager.store_path_perms
get_configuration_file_path = manager.get_configuration_file_path

__all__ = [
    "CODEC",
    "manager",
    "load",
    "load_path",
    "store",
    "store_path",
    "store_path_perms",
    "get_configuration_file_path",
]
