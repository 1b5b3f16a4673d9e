# fping_stats/stats/aggregate.py
import logging
import math
import re
from typing import Iterator, List, Tuple

from fping_stats.schemas import Result, ResultSet
from fping_stats.stats.rounding import to_fixed

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")

# stddev precision does not follow the `digits` option
STDDEV_DIGITS = 3


def parse_sample(token: str, timeout: float) -> float:
    """A latency token as float; anything that is not a plain number means no reply."""
    if _NUMBER.match(token):
        return float(token)
    return float(timeout)


def iter_lines(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (host, data) for every `host : t1 t2 ...` line of fping -C output.
    Lines that don't have that shape are skipped. The split is on the last
    colon because IPv6 hosts contain colons and samples never do.
    """
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        host, sep, data = line.rpartition(":")
        host = host.strip()
        # a host is a single token; anything else is an fping warning or ICMP notice
        if not sep or not host or len(host.split()) > 1:
            logger.debug("dropping unparseable line: %r", line)
            continue
        yield host, data.strip()


def _empty_result(host: str) -> Result:
    nan = float("nan")
    return {
        "target": host, "sent": 0, "received": 0, "loss": nan,
        "avg": nan, "min": nan, "max": nan, "stddev": nan, "times": [],
    }


def aggregate(host: str, data: str, timeout: float = 500,
              digits: int = 3, loss_digits: int = 4) -> Result:
    times: List[float] = [parse_sample(tok, timeout) for tok in data.split(" ")] if data else []
    if not times:
        # nothing to average over; leave the statistics undefined
        return _empty_result(host)

    sent = len(times)
    # a reply of exactly `timeout` is indistinguishable from the sentinel, so it counts as lost
    received = sum(1 for t in times if t < timeout)
    avg = sum(times) / sent
    variance = sum((t - avg) ** 2 for t in times) / sent

    return {
        "target": host,
        "sent": sent,
        "received": received,
        "loss": to_fixed(1 - received / sent, loss_digits),
        "avg": to_fixed(avg, digits),
        "min": to_fixed(min(times), digits),
        "max": to_fixed(max(times), digits),
        "stddev": to_fixed(math.sqrt(variance), STDDEV_DIGITS),
        "times": [to_fixed(t, digits) for t in times],
    }


def parse_output(text: str, timeout: float = 500,
                 digits: int = 3, loss_digits: int = 4) -> ResultSet:
    """Build a ResultSet from raw fping output. Never raises on bad lines."""
    results: ResultSet = {}
    for host, data in iter_lines(text):
        results[host] = aggregate(host, data, timeout, digits, loss_digits)
    return results
