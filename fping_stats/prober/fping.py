# fping_stats/prober/fping.py
import logging
import os
import shlex
import shutil
import subprocess
from typing import List, Optional, Sequence

from fping_stats.errors import ToolNotFound
from fping_stats.prober.base import Runner

logger = logging.getLogger(__name__)


class FpingRunner(Runner):
    """
    Runs the real fping binary. `binary` may be a bare name looked up on PATH
    or an explicit path. With use_sudo the command is prefixed by `sudo -n`,
    which needs a NOPASSWD rule for fping (or give fping cap_net_raw instead).
    """

    def __init__(self,
                 binary: str = "fping",
                 use_sudo: bool = False,
                 process_timeout: Optional[float] = None):
        self.binary = binary
        self.use_sudo = use_sudo
        self.process_timeout = process_timeout
        self._path: Optional[str] = None

    def locate(self) -> str:
        if os.sep in self.binary:
            usable = os.path.isfile(self.binary) and os.access(self.binary, os.X_OK)
            path = self.binary if usable else None
        else:
            path = shutil.which(self.binary)
        if not path:
            raise ToolNotFound(f"{self.binary} could not be found, is it installed?")
        logger.debug("using fping at %s", path)
        self._path = path
        return path

    def _build_cmd(self, args: Sequence[str]) -> List[str]:
        cmd = [self._path or self.locate(), *args]
        if self.use_sudo:
            # -n avoids a password prompt
            return ["sudo", "-n", *cmd]
        return cmd

    def run(self, args: Sequence[str]) -> str:
        cmd = self._build_cmd(args)
        logger.debug("running %s", shlex.join(cmd))
        # TimeoutExpired propagates to the caller
        proc = subprocess.run(cmd, check=False, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                              text=True, timeout=self.process_timeout)
        # fping exits 1 when some host was unreachable and still prints its summary
        logger.debug("fping exited with %s", proc.returncode)
        # -q -C writes the per-target summary to stderr; stdout wins if it has anything
        return proc.stdout or proc.stderr
