"""Map a workflow command to the script that implements it.

Search order inside the scaffold directory:

1. scripts/<command>.sh  -> runnable script
2. instructions/<command>.md -> documentation only, logged but never run
3. nothing -> the caller falls back
"""

import logging
from pathlib import Path

from sdd_runner.integrations.filesystem import Filesystem
from sdd_runner.models.command import SddCommand
from sdd_runner.models.resolution import ScriptResolution

logger = logging.getLogger(__name__)

SCRIPTS_DIR_NAME = "scripts"
INSTRUCTIONS_DIR_NAME = "instructions"
SCRIPT_EXTENSION = ".sh"
INSTRUCTION_EXTENSION = ".md"


def script_path_for(command: SddCommand, scaffold_dir: Path) -> Path:
    return scaffold_dir / SCRIPTS_DIR_NAME / f"{command.value}{SCRIPT_EXTENSION}"


def instruction_path_for(command: SddCommand, scaffold_dir: Path) -> Path:
    return scaffold_dir / INSTRUCTIONS_DIR_NAME / f"{command.value}{INSTRUCTION_EXTENSION}"


def resolve_script(
    command: SddCommand, scaffold_dir: Path, filesystem: Filesystem
) -> ScriptResolution:
    """Resolve command to a script under scaffold_dir.

    Examples:
        sdd-fix -> .agent-sdd/scripts/sdd-fix.sh
        sdd-fix with only .agent-sdd/instructions/sdd-fix.md -> kind "instruction"
    """
    logger.debug("Looking for script for command: %s in %s", command.value, scaffold_dir)

    script_path = script_path_for(command, scaffold_dir)
    if filesystem.is_file(script_path):
        logger.info("Found script: %s", script_path)
        return ScriptResolution(command=command, script_path=script_path, instruction_path=None)

    instruction_path = instruction_path_for(command, scaffold_dir)
    if filesystem.is_file(instruction_path):
        logger.info(
            "Found instruction file: %s, no runnable script for %s",
            instruction_path,
            command.value,
        )
        return ScriptResolution(
            command=command, script_path=None, instruction_path=instruction_path
        )

    logger.warning("No script found for command: %s", command.value)
    return ScriptResolution(command=command, script_path=None, instruction_path=None)


def resolve_all(scaffold_dir: Path, filesystem: Filesystem) -> list[ScriptResolution]:
    """Resolve every allowed command, in declaration order."""
    return [resolve_script(command, scaffold_dir, filesystem) for command in SddCommand]
