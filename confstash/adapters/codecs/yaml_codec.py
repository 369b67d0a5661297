"""YAML codec backed by PyYAML's safe loader and dumper."""

from typing import Any

import yaml

from confstash.ports.codecs import CodecError


class YamlCodec:
    """Codec for .yaml config files.

    Keys are written in field order rather than sorted so the file reads in
    the same order as the dataclass.
    """

    name = "yaml"
    extension = "yaml"
    supports_null = True

    def serialize(self, data: dict[str, Any]) -> str:
        try:
            return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise CodecError(f"Cannot encode config as YAML: {e}") from e

    def deserialize(self, text: str) -> dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CodecError(f"Invalid YAML: {e}") from e

        # An empty document is an empty mapping
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise CodecError(
                f"Invalid YAML: expected a mapping at top level, got {type(data).__name__}"
            )
        return data
