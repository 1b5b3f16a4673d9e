# fping_stats/stats/__init__.py
from fping_stats.stats.aggregate import aggregate, iter_lines, parse_output, parse_sample
from fping_stats.stats.rounding import to_fixed

__all__ = ["aggregate", "iter_lines", "parse_output", "parse_sample", "to_fixed"]
