# fping_stats/config.py
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Union

from fping_stats.errors import InvalidOption


@dataclass(frozen=True)
class Options:
    bytes: int = 56          # ping payload size
    backoff: float = 1.5     # exponential backoff factor
    count: int = 1           # pings per target
    interval: int = 10       # ms between any two sends
    period: int = 1000       # ms between pings to the same target
    retry: int = 3
    random: bool = True      # random payload (-R)
    timeout: int = 500       # ms; also what a lost ping is recorded as

    # output precision
    digits: int = 3
    loss_digits: int = 4


# same ceiling as fixed-point formatting allows
MAX_DIGITS = 100

# camelCase spellings accepted in option mappings
_ALIASES = {"lossDigits": "loss_digits"}

OptionsLike = Union[Options, Mapping[str, Any], None]


def make_options(options: OptionsLike = None) -> Options:
    """
    Return a fully populated Options. Accepts None, an Options instance or a
    mapping of overrides; anything left unset keeps its default.
    """
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options

    known = {f.name for f in fields(Options)}
    overrides = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise InvalidOption(f"Unknown option: {key}")
        if value is not None:
            overrides[name] = value
    return Options(**overrides)


def validate_options(options: Options) -> Options:
    """Check the hard limits and return a copy with the soft ones clamped."""
    if options.bytes < 40:
        raise InvalidOption("Bytes must be at least 40 bytes")
    if options.count <= 0:
        raise InvalidOption("Count must be >= 1")
    if options.loss_digits < 2:
        raise InvalidOption("lossDigits must be at least 2")
    if options.digits > MAX_DIGITS or options.loss_digits > MAX_DIGITS:
        raise InvalidOption(f"digits and lossDigits must be at most {MAX_DIGITS}")

    return replace(
        options,
        backoff=max(options.backoff, 0),
        interval=max(options.interval, 0),
        period=max(options.period, 0),
        retry=max(options.retry, 0),
        timeout=max(options.timeout, 0),
        digits=max(options.digits, 0),
    )


def resolve_options(options: OptionsLike = None) -> Options:
    return validate_options(make_options(options))
