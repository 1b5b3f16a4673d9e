# fping_stats/controller.py
import asyncio
import logging
from typing import Iterable, Optional

from fping_stats.config import OptionsLike
from fping_stats.prober.base import Runner
from fping_stats.prober.fping import FpingRunner
from fping_stats.request import build_request
from fping_stats.schemas import ResultSet
from fping_stats.stats import parse_output

logger = logging.getLogger(__name__)


class PingController:
    def __init__(self, runner: Runner, options: OptionsLike = None):
        self.runner = runner
        self.options = options

    def run(self, targets: Iterable[str]) -> ResultSet:
        # everything that can reject the call happens before fping is started
        req = build_request(targets, self.options)
        self.runner.locate()

        out = self.runner.run(req.args)

        o = req.options
        results = parse_output(out, timeout=o.timeout, digits=o.digits, loss_digits=o.loss_digits)
        logger.debug("parsed %d of %d targets", len(results), len(req.targets))
        return results


def fping(targets: Iterable[str], options: OptionsLike = None,
          runner: Optional[Runner] = None) -> ResultSet:
    """
    Ping every target with fping and return per-target statistics keyed by
    address. Raises InvalidTarget / InvalidOption / ToolNotFound before
    anything is sent; targets fping printed nothing for are left out.
    """
    return PingController(runner or FpingRunner(), options).run(targets)


async def async_fping(targets: Iterable[str], options: OptionsLike = None,
                      runner: Optional[Runner] = None) -> ResultSet:
    # fping does all the concurrent work; we only wait for it off the event loop
    return await asyncio.to_thread(fping, list(targets), options, runner)
