"""Real filesystem operations using pathlib and os.chmod."""

import logging
import os
from pathlib import Path

from sdd_runner.integrations.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)

SCRIPT_MODE = 0o755


class RealFilesystem(Filesystem):
    """Production implementation backed by the local filesystem."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def make_executable(self, path: Path) -> bool:
        """Set rwxr-xr-x on POSIX; no-op elsewhere."""
        if os.name != "posix":
            return True
        try:
            os.chmod(path, SCRIPT_MODE)
        except OSError as e:
            logger.warning("Could not mark %s executable: %s", path, e)
            return False
        return True
