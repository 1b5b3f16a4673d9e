# fping_stats/schemas.py
from typing import Dict, List, TypedDict


class Result(TypedDict):
    target: str
    sent: int
    received: int
    loss: float      # fraction 0..1, not percent
    avg: float
    min: float
    max: float
    stddev: float    # always 3 decimals
    times: List[float]  # one entry per probe, timeout value for lost ones


# keyed by the host exactly as fping printed it; hosts with no line are absent
ResultSet = Dict[str, Result]
