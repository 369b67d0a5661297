"""Config operations reading and writing YAML. Requires the ``yaml`` extra (PyYAML).

Import this module to fix the config format for your application::

    from confstash import yaml_conf

    cfg = yaml_conf.load("my-app", MyConfig)
"""

from confstash.adapters.codecs.yaml_codec import YamlCodec
from confstash.core.manager import ConfigManager

CODEC = YamlCodec()

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
