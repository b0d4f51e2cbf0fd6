"""In-memory fake filesystem for testing."""

from pathlib import Path

from sdd_runner.integrations.filesystem.abc import Filesystem


class FakeFilesystem(Filesystem):
    """In-memory fake implementation of the filesystem checks.

    Constructor Injection:
    - Directories and files are provided via constructor parameters
    - Every query is recorded in checked_paths for test assertions

    Examples:
        >>> fs = FakeFilesystem(
        ...     directories={Path("/repo"), Path("/repo/.agent-sdd")},
        ...     files={Path("/repo/.agent-sdd/scripts/sdd-fix.sh")},
        ... )
        >>> fs.is_dir(Path("/repo"))
        True
        >>> fs.checked_paths
        [PosixPath('/repo')]
    """

    def __init__(
        self,
        *,
        directories: set[Path] | None = None,
        files: set[Path] | None = None,
        chmod_succeeds: bool = True,
    ) -> None:
        """Create FakeFilesystem with a predetermined tree.

        Args:
            directories: Paths that report as directories
            files: Paths that report as regular files
            chmod_succeeds: Value returned from make_executable()
        """
        self._directories = directories or set()
        self._files = files or set()
        self._chmod_succeeds = chmod_succeeds
        self._checked_paths: list[Path] = []
        self._executable_calls: list[Path] = []

    @property
    def checked_paths(self) -> list[Path]:
        """Paths passed to is_dir()/is_file(), in call order."""
        return self._checked_paths.copy()

    @property
    def executable_calls(self) -> list[Path]:
        """Paths passed to make_executable(), in call order."""
        return self._executable_calls.copy()

    def is_dir(self, path: Path) -> bool:
        self._checked_paths.append(path)
        return path in self._directories

    def is_file(self, path: Path) -> bool:
        self._checked_paths.append(path)
        return path in self._files

    def make_executable(self, path: Path) -> bool:
        self._executable_calls.append(path)
        return self._chmod_succeeds
