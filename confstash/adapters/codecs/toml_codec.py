"""TOML codec.

Reads with the built-in tomllib (Python 3.11+) and writes with tomli_w.
TOML has no null: the engine flattens values with None-valued optional fields
left out, and tomli_w rejects any None that is still present.
"""

import tomllib
from typing import Any

import tomli_w

from confstash.ports.codecs import CodecError


class TomlCodec:
    """Codec for .toml config files."""

    name = "toml"
    extension = "toml"
    supports_null = False

    def serialize(self, data: dict[str, Any]) -> str:
        try:
            return tomli_w.dumps(data)
        except (TypeError, ValueError) as e:
            raise CodecError(f"Cannot encode config as TOML: {e}") from e

    def deserialize(self, text: str) -> dict[str, Any]:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise CodecError(f"Invalid TOML: {e}") from e
