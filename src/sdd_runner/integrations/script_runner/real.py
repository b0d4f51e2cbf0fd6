"""Real script runner using subprocess on a worker thread.

The blocking spawn-and-wait runs inside asyncio.to_thread() so it never blocks
the event loop. The caller races that worker against the timeout with
asyncio.wait_for().
"""

import asyncio
import logging
import os
import signal
import subprocess
import threading
from pathlib import Path

from sdd_runner.integrations.script_runner.abc import ScriptRunner
from sdd_runner.models.resolution import (
    ScriptExited,
    ScriptOutcome,
    ScriptSpawnFailed,
    ScriptTimedOut,
)

logger = logging.getLogger(__name__)


def _terminate_process_group(process: subprocess.Popen[str]) -> None:
    """Kill the child and everything it spawned.

    The child is started in its own session on POSIX, so its pid is also its
    process group id.
    """
    if process.poll() is not None:
        return
    try:
        if os.name == "posix":
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()
    except ProcessLookupError:
        pass


class _ProcessHandle:
    """Hands the Popen object from the worker thread to the waiting coroutine.

    The timeout can fire before the worker has finished spawning; abandon()
    marks the handle so the worker kills the child as soon as it attaches.
    """

    def __init__(self, kill_on_abandon: bool) -> None:
        self._lock = threading.Lock()
        self._process: subprocess.Popen[str] | None = None
        self._abandoned = False
        self._kill_on_abandon = kill_on_abandon

    def attach(self, process: subprocess.Popen[str]) -> None:
        with self._lock:
            self._process = process
            abandoned = self._abandoned
        if abandoned and self._kill_on_abandon:
            _terminate_process_group(process)

    def abandon(self) -> None:
        with self._lock:
            self._abandoned = True
            process = self._process
        if process is not None and self._kill_on_abandon:
            _terminate_process_group(process)


class RealScriptRunner(ScriptRunner):
    """Production implementation running scripts through a shell interpreter.

    Args:
        kill_on_timeout: When True (default) the child's process group is
            killed once the caller stops waiting. When False the child is
            left running and only the caller's wait ends.
    """

    def __init__(self, *, kill_on_timeout: bool = True) -> None:
        self._kill_on_timeout = kill_on_timeout

    async def run_script(
        self,
        interpreter: str,
        script_path: Path,
        task_id: str,
        cwd: Path,
        timeout_seconds: float,
    ) -> ScriptOutcome:
        argv = [interpreter, str(script_path), task_id]
        handle = _ProcessHandle(kill_on_abandon=self._kill_on_timeout)

        logger.info("Executing script: %s with task ID: %s", script_path, task_id)
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._spawn_and_wait, argv, cwd, handle),
                timeout=timeout_seconds,
            )
        except TimeoutError:
            handle.abandon()
            logger.warning(
                "Script %s timed out after %s seconds (kill_on_timeout=%s)",
                script_path,
                timeout_seconds,
                self._kill_on_timeout,
            )
            return ScriptTimedOut(timeout_seconds=timeout_seconds)

    def _spawn_and_wait(
        self, argv: list[str], cwd: Path, handle: _ProcessHandle
    ) -> ScriptOutcome:
        """Blocking body run on the worker thread."""
        try:
            process = subprocess.Popen(
                argv,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                start_new_session=os.name == "posix",
            )
        except (OSError, ValueError) as e:
            # ValueError: argv the OS cannot represent, such as an embedded NUL
            logger.error("Failed to execute script: %s", e)
            return ScriptSpawnFailed(message=str(e))

        handle.attach(process)
        stdout, stderr = process.communicate()
        returncode = process.returncode

        logger.debug("Script exit code: %s", returncode)
        logger.debug("Script stdout: %s", stdout)
        logger.debug("Script stderr: %s", stderr)

        if returncode < 0:
            return ScriptExited(
                exit_code=None,
                stdout=stdout,
                stderr=stderr,
                signal_number=-returncode,
            )
        return ScriptExited(exit_code=returncode, stdout=stdout, stderr=stderr)
