"""JSON codec using the standard library json module."""

import json
from typing import Any

from confstash.ports.codecs import CodecError


class JsonCodec:
    """Codec for .json config files, written indented with a trailing newline."""

    name = "json"
    extension = "json"
    supports_null = True

    def serialize(self, data: dict[str, Any]) -> str:
        try:
            return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise CodecError(f"Cannot encode config as JSON: {e}") from e

    def deserialize(self, text: str) -> dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CodecError(f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise CodecError(
                f"Invalid JSON: expected an object at top level, got {type(data).__name__}"
            )
        return data
