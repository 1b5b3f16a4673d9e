# fping_stats/__init__.py
from fping_stats.config import Options, make_options, resolve_options, validate_options
from fping_stats.controller import PingController, async_fping, fping
from fping_stats.errors import FpingError, InvalidOption, InvalidTarget, ToolNotFound
from fping_stats.prober import FakeRunner, FpingRunner, Runner
from fping_stats.request import Request, build_args, build_request, check_ip
from fping_stats.schemas import Result, ResultSet
from fping_stats.stats import aggregate, iter_lines, parse_output, parse_sample, to_fixed

__all__ = [
    "Options", "make_options", "resolve_options", "validate_options",
    "PingController", "async_fping", "fping",
    "FpingError", "InvalidOption", "InvalidTarget", "ToolNotFound",
    "FakeRunner", "FpingRunner", "Runner",
    "Request", "build_args", "build_request", "check_ip",
    "Result", "ResultSet",
    "aggregate", "iter_lines", "parse_output", "parse_sample", "to_fixed",
]
