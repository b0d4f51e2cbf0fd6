"""Script execution integration."""

from sdd_runner.integrations.script_runner.abc import ScriptRunner
from sdd_runner.integrations.script_runner.fake import FakeScriptRunner, RunScriptCall
from sdd_runner.integrations.script_runner.real import RealScriptRunner

__all__ = ["FakeScriptRunner", "RealScriptRunner", "RunScriptCall", "ScriptRunner"]
