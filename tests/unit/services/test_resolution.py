"""Tests for script resolution."""

from collections.abc import Callable
from pathlib import Path

from sdd_runner.integrations.filesystem import FakeFilesystem
from sdd_runner.models.command import SddCommand
from sdd_runner.models.resolution import ResolutionKind
from sdd_runner.services.resolution import (
    instruction_path_for,
    resolve_all,
    resolve_script,
    script_path_for,
)

SCAFFOLD = Path("/work/project/.agent-sdd")


def test_script_path_layout() -> None:
    assert script_path_for(SddCommand.QUEUE_TWEAK, SCAFFOLD) == Path(
        "/work/project/.agent-sdd/scripts/sdd-queue-tweak.sh"
    )


def test_instruction_path_layout() -> None:
    assert instruction_path_for(SddCommand.FIX, SCAFFOLD) == Path(
        "/work/project/.agent-sdd/instructions/sdd-fix.md"
    )


def test_resolves_installed_script(scaffold_filesystem: Callable[..., FakeFilesystem]) -> None:
    fs = scaffold_filesystem(scripts=("sdd-fix",))

    resolution = resolve_script(SddCommand.FIX, SCAFFOLD, fs)

    assert resolution.kind is ResolutionKind.SCRIPT
    assert resolution.script_path == SCAFFOLD / "scripts" / "sdd-fix.sh"
    assert resolution.instruction_path is None


def test_script_is_preferred_over_instruction(
    scaffold_filesystem: Callable[..., FakeFilesystem],
) -> None:
    """The instruction file is not even looked at once a script is found."""
    fs = scaffold_filesystem(scripts=("sdd-tweak",), instructions=("sdd-tweak",))

    resolution = resolve_script(SddCommand.TWEAK, SCAFFOLD, fs)

    assert resolution.kind is ResolutionKind.SCRIPT
    assert SCAFFOLD / "instructions" / "sdd-tweak.md" not in fs.checked_paths


def test_instruction_only_is_not_runnable(
    scaffold_filesystem: Callable[..., FakeFilesystem],
) -> None:
    fs = scaffold_filesystem(instructions=("sdd-check-task",))

    resolution = resolve_script(SddCommand.CHECK_TASK, SCAFFOLD, fs)

    assert resolution.kind is ResolutionKind.INSTRUCTION
    assert resolution.script_path is None
    assert resolution.instruction_path == SCAFFOLD / "instructions" / "sdd-check-task.md"


def test_nothing_installed(scaffold_filesystem: Callable[..., FakeFilesystem]) -> None:
    fs = scaffold_filesystem()

    resolution = resolve_script(SddCommand.EXECUTE_TASK, SCAFFOLD, fs)

    assert resolution.kind is ResolutionKind.NONE


def test_script_directory_with_script_name_does_not_resolve() -> None:
    """Only regular files count as scripts."""
    script_dir = SCAFFOLD / "scripts" / "sdd-fix.sh"
    fs = FakeFilesystem(directories={SCAFFOLD, script_dir})

    resolution = resolve_script(SddCommand.FIX, SCAFFOLD, fs)

    assert resolution.kind is ResolutionKind.NONE


def test_resolve_all_covers_every_command_in_order(
    scaffold_filesystem: Callable[..., FakeFilesystem],
) -> None:
    fs = scaffold_filesystem(scripts=("sdd-fix",), instructions=("sdd-tweak",))

    resolutions = resolve_all(SCAFFOLD, fs)

    assert [r.command for r in resolutions] == list(SddCommand)
    kinds = {r.command: r.kind for r in resolutions}
    assert kinds[SddCommand.FIX] is ResolutionKind.SCRIPT
    assert kinds[SddCommand.TWEAK] is ResolutionKind.INSTRUCTION
    assert kinds[SddCommand.EXECUTE_TASK] is ResolutionKind.NONE
