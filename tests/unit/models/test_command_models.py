"""Tests for command request and result models."""

from pathlib import Path

import pytest

from sdd_runner.errors import InvalidCommandError
from sdd_runner.models.command import (
    PLACEHOLDER_MARKER,
    CommandRequest,
    CommandResult,
    SddCommand,
)
from sdd_runner.models.resolution import ResolutionKind, ScriptResolution


class TestSddCommand:
    """Tests for the closed command set."""

    def test_allow_list_has_six_commands(self) -> None:
        """Exactly the six workflow commands are allowed."""
        assert [c.value for c in SddCommand] == [
            "sdd-execute-task",
            "sdd-fix",
            "sdd-tweak",
            "sdd-check-task",
            "sdd-queue-fix",
            "sdd-queue-tweak",
        ]

    @pytest.mark.parametrize("raw", [c.value for c in SddCommand])
    def test_parse_accepts_every_allowed_command(self, raw: str) -> None:
        """parse() returns the matching member."""
        assert SddCommand.parse(raw).value == raw

    @pytest.mark.parametrize("raw", ["", "sdd-bogus", "SDD-FIX", " sdd-fix", "sdd-fix.sh"])
    def test_parse_rejects_anything_else(self, raw: str) -> None:
        """Matching is exact and case-sensitive."""
        with pytest.raises(InvalidCommandError) as exc_info:
            SddCommand.parse(raw)

        assert exc_info.value.command == raw
        assert exc_info.value.error_type == "invalid_command"


class TestCommandRequest:
    """Tests for CommandRequest."""

    def test_scaffold_dir_is_inside_project(self) -> None:
        """scaffold_dir is <project>/.agent-sdd."""
        request = CommandRequest(
            command=SddCommand.FIX,
            task_id="1.1",
            spec_path=Path("/p/spec"),
            project_path=Path("/p"),
        )

        assert request.scaffold_dir == Path("/p/.agent-sdd")


class TestCommandResult:
    """Tests for CommandResult invariants."""

    def test_success_with_error_message_is_rejected(self) -> None:
        """A successful result must not carry an error message."""
        with pytest.raises(ValueError, match="must not carry"):
            CommandResult(
                success=True,
                exit_code=0,
                stdout="",
                stderr="",
                duration_ms=1,
                error_message="boom",
            )

    def test_failure_without_error_message_is_rejected(self) -> None:
        """A failed result must explain itself."""
        with pytest.raises(ValueError, match="requires an error_message"):
            CommandResult(
                success=False,
                exit_code=1,
                stdout="",
                stderr="",
                duration_ms=1,
                error_message=None,
            )

    def test_negative_duration_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="duration_ms"):
            CommandResult(
                success=True,
                exit_code=0,
                stdout="",
                stderr="",
                duration_ms=-1,
                error_message=None,
            )

    def test_is_placeholder_follows_simulated_flag(self) -> None:
        """Simulated runs are distinguishable from real ones."""
        simulated = CommandResult(
            success=True,
            exit_code=0,
            stdout=f"Task ID: 1\n\n{PLACEHOLDER_MARKER}",
            stderr="",
            duration_ms=500,
            error_message=None,
            simulated=True,
        )
        real = CommandResult(
            success=True,
            exit_code=0,
            stdout="done\n",
            stderr="",
            duration_ms=10,
            error_message=None,
        )

        assert simulated.is_placeholder is True
        assert real.is_placeholder is False

    def test_script_output_quoting_the_marker_is_not_simulated(self) -> None:
        """A real script that prints the placeholder sentence is still a real run."""
        result = CommandResult(
            success=True,
            exit_code=0,
            stdout=f"{PLACEHOLDER_MARKER}\n",
            stderr="",
            duration_ms=10,
            error_message=None,
        )

        assert result.is_placeholder is False

    def test_failed_result_cannot_be_simulated(self) -> None:
        with pytest.raises(ValueError, match="can be simulated"):
            CommandResult(
                success=False,
                exit_code=1,
                stdout="",
                stderr="",
                duration_ms=0,
                error_message="boom",
                simulated=True,
            )


class TestScriptResolution:
    """Tests for ScriptResolution.kind."""

    def test_script_wins_over_instruction(self) -> None:
        resolution = ScriptResolution(
            command=SddCommand.FIX,
            script_path=Path("/s.sh"),
            instruction_path=Path("/i.md"),
        )

        assert resolution.kind is ResolutionKind.SCRIPT
        assert resolution.is_runnable is True

    def test_instruction_only_is_not_runnable(self) -> None:
        resolution = ScriptResolution(
            command=SddCommand.FIX, script_path=None, instruction_path=Path("/i.md")
        )

        assert resolution.kind is ResolutionKind.INSTRUCTION
        assert resolution.is_runnable is False

    def test_nothing_found(self) -> None:
        resolution = ScriptResolution(command=SddCommand.FIX, script_path=None, instruction_path=None)

        assert resolution.kind is ResolutionKind.NONE
        assert resolution.is_runnable is False
