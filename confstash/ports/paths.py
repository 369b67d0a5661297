"""Path provider port interface.

Defines the lookup of the OS-conventional configuration directory for an
application. Enables tests to redirect config storage to a temp directory.
"""

from pathlib import Path
from typing import Protocol


class PathProvider(Protocol):
    """Protocol for platform config directory lookup."""

    def config_dir(self, qualifier: str, organization: str, application: str) -> Path:
        """Return the config directory for an application.

        Args:
            qualifier: Reverse-domain style prefix (e.g. "py")
            organization: Organization name, may be empty
            application: Application name

        Returns:
            Absolute directory path (may not exist yet)

        Raises:
            PathResolutionError: If the platform's config directory cannot
                be determined (unknown platform, no home directory)
        """
        ...
