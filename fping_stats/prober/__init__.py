# fping_stats/prober/__init__.py
from fping_stats.prober.base import Runner
from fping_stats.prober.fake import FakeRunner
from fping_stats.prober.fping import FpingRunner

__all__ = ["Runner", "FakeRunner", "FpingRunner"]
