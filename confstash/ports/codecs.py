"""Codec port interface.

A codec turns plain data (see confstash.domain.values) into the text of one
file format and back. Exactly one codec is bound to a ConfigManager; the
load/store engine never inspects which format it is using.
"""

from typing import Any, Protocol


class CodecError(ValueError):
    """Raised by codecs when text cannot be decoded or data cannot be encoded."""


class Codec(Protocol):
    """Protocol for text serialization formats."""

    name: str
    extension: str
    # False for formats with no null value (TOML)
    supports_null: bool

    def serialize(self, data: dict[str, Any]) -> str:
        """Encode plain data as text.

        Args:
            data: Document produced by confstash.domain.values.to_data

        Returns:
            Full file contents

        Raises:
            CodecError: If the data cannot be represented in this format
        """
        ...

    def deserialize(self, text: str) -> dict[str, Any]:
        """Decode text into plain data.

        Args:
            text: Full file contents

        Returns:
            Decoded document

        Raises:
            CodecError: If the text is not valid in this format or does not
                hold a top-level table
        """
        ...
