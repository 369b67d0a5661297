"""Path provider backed by platformdirs.

Maps an application namespace onto the platform's config location:
- Linux/BSD: $XDG_CONFIG_HOME/<application> or ~/.config/<application>
- macOS: ~/Library/Application Support/<qualifier>.<organization>.<application>
- Windows: %APPDATA%/<organization>/<application>/config
"""

import logging
import platform
from pathlib import Path

from platformdirs import user_config_dir

from confstash.domain.exceptions import PathResolutionError

logger = logging.getLogger(__name__)


class PlatformDirsProvider:
    """PathProvider implementation using platformdirs.user_config_dir."""

    def config_dir(self, qualifier: str, organization: str, application: str) -> Path:
        """Return the config directory for an application.

        Args:
            qualifier: Reverse-domain style prefix, used on macOS only
            organization: Organization name, may be empty
            application: Application name

        Returns:
            Absolute config directory (may not exist)

        Raises:
            PathResolutionError: If platformdirs cannot determine a directory
        """
        system = platform.system()
        try:
            if system == "Darwin":
                bundle_id = _bundle_id(qualifier, organization, application)
                directory = Path(user_config_dir(bundle_id, appauthor=False))
            elif system == "Windows":
                directory = Path(
                    user_config_dir(application, appauthor=organization or False, roaming=True)
                ) / "config"
            else:
                directory = Path(
                    user_config_dir(application.lower().replace(" ", ""), appauthor=False)
                )
        except (KeyError, OSError, RuntimeError) as e:
            raise PathResolutionError(
                f"Could not determine the config directory on {system or 'this platform'}",
                cause=e,
                hint="Make sure a home directory is set for the current user",
            ) from e

        if not directory.is_absolute():
            raise PathResolutionError(
                f"Config directory for '{application}' is not absolute: {directory}",
                path=directory,
                hint="Set XDG_CONFIG_HOME to an absolute path",
            )

        logger.debug("Config directory for %s on %s: %s", application, system, directory)
        return directory


def _bundle_id(qualifier: str, organization: str, application: str) -> str:
    parts = [qualifier, organization, application]
    return ".".join(part.strip().replace(" ", "-") for part in parts if part.strip())
