from sdd_runner.integrations.time.abc import Time
from sdd_runner.integrations.time.fake import FakeTime
from sdd_runner.integrations.time.real import RealTime

__all__ = ["FakeTime", "RealTime", "Time"]
