# fping_stats/request.py
import ipaddress
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from fping_stats.config import Options, OptionsLike, make_options, validate_options
from fping_stats.errors import InvalidTarget


@dataclass(frozen=True)
class Request:
    options: Options
    targets: Tuple[str, ...]
    args: Tuple[str, ...]   # flags followed by targets, ready for the runner


def check_ip(value: str) -> str:
    """Return the canonical form of an IPv4/IPv6 literal or raise InvalidTarget."""
    try:
        if ":" in value:
            return str(ipaddress.IPv6Address(value))
        return str(ipaddress.IPv4Address(value))
    except ValueError as e:
        raise InvalidTarget(value, f"{e} {value}") from e


def build_args(options: Options) -> List[str]:
    # -A: show targets by address, -q: quiet, -C: per-target sample list at exit
    args = [
        "-A",
        "-q",
        "-b", str(options.bytes),
        "-B", str(options.backoff),
        "-C", str(options.count),
        "-i", str(options.interval),
        "-p", str(options.period),
        "-r", str(options.retry),
        "-t", str(options.timeout),
    ]
    if options.random:
        args.append("-R")
    return args


def build_request(targets: Iterable[str], options: OptionsLike = None) -> Request:
    opts = make_options(options)
    # fail on the first bad target, before looking at the options
    checked = tuple(check_ip(t) for t in targets)
    opts = validate_options(opts)
    return Request(options=opts, targets=checked, args=tuple(build_args(opts) + list(checked)))
