"""Filesystem integration used for path validation and script lookup."""

from sdd_runner.integrations.filesystem.abc import Filesystem
from sdd_runner.integrations.filesystem.fake import FakeFilesystem
from sdd_runner.integrations.filesystem.real import RealFilesystem

__all__ = ["FakeFilesystem", "Filesystem", "RealFilesystem"]
