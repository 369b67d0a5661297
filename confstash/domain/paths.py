"""Resolved config file locations."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_NAME = "default-config"
DEFAULT_QUALIFIER = "py"


@dataclass(frozen=True)
class ResolvedPath:
    """Directory and file name where a config lives.

    Attributes:
        directory: Absolute directory holding the config file
        file_name: File name including the codec's extension
    """

    directory: Path
    file_name: str

    @property
    def path(self) -> Path:
        """Full path to the config file."""
        return self.directory / self.file_name

    @property
    def stem(self) -> str:
        """File name without its extension."""
        return self.path.stem
