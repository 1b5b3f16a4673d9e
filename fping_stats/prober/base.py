# fping_stats/prober/base.py
from abc import ABC, abstractmethod
from typing import Sequence


class Runner(ABC):
    @abstractmethod
    def locate(self) -> str:
        """Return the path of the probing binary, or raise ToolNotFound."""
        raise NotImplementedError

    @abstractmethod
    def run(self, args: Sequence[str]) -> str:
        """Run the binary with args and return its captured output text."""
        raise NotImplementedError
