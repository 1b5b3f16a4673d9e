# fping_stats/prober/fake.py
from collections import deque
from typing import Iterable, List, Optional, Sequence

from fping_stats.errors import ToolNotFound
from fping_stats.prober.base import Runner


class FakeRunner(Runner):
    """
    outputs: raw fping texts handed back one per run() call, in order.
    Once they run out every call returns "". Every argv received is kept in
    self.calls so tests can check what would have been executed.
    """
    def __init__(self, outputs: Optional[Iterable[str]] = None,
                 binary: str = "/usr/bin/fping", available: bool = True):
        self.outputs = deque(outputs or [])
        self.binary = binary
        self.available = available
        self.calls: List[List[str]] = []

    def locate(self) -> str:
        if not self.available:
            raise ToolNotFound("fping could not be found, is it installed?")
        return self.binary

    def run(self, args: Sequence[str]) -> str:
        self.calls.append(list(args))
        if self.outputs:
            return self.outputs.popleft()
        return ""
