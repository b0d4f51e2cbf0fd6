"""Abstract interface for the filesystem checks the runner performs.

Every filesystem touch made before a script is spawned goes through this
interface, so tests can assert that a rejected request never reached disk.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract interface for filesystem queries and the executable-bit update."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check whether path exists and is a directory.

        Args:
            path: Path to check

        Returns:
            True if path exists and is a directory, False otherwise
        """
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check whether path exists and is a regular file.

        Args:
            path: Path to check

        Returns:
            True if path exists and is a file, False otherwise
        """
        ...

    @abstractmethod
    def make_executable(self, path: Path) -> bool:
        """Mark a script as executable where the platform needs it.

        Idempotent. Failure is reported through the return value rather than
        raised, because a script can still run through its interpreter
        without the executable bit.

        Args:
            path: Script file to update

        Returns:
            True if the file is executable afterwards (or the platform has no
            such bit), False if the update failed
        """
        ...
