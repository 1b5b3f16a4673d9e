# tests/test_controller_unit.py
import asyncio

import pytest

from fping_stats import (FakeRunner, InvalidOption, InvalidTarget, Options, PingController,
                         ToolNotFound, async_fping, fping)


def test_count_one():
    fake = FakeRunner(outputs=["1.1.1.1 : 12.3\n8.8.8.8 : 20.1\n"])
    results = fping(["1.1.1.1", "8.8.8.8"], {"count": 1}, runner=fake)
    for host in ("1.1.1.1", "8.8.8.8"):
        assert len(results[host]["times"]) == 1
    assert results["1.1.1.1"]["loss"] == 0.0


def test_count_three_with_loss():
    fake = FakeRunner(outputs=["8.8.8.8 : 10.0 - 20.0\n"])
    r = fping(["8.8.8.8"], {"count": 3, "timeout": 500}, runner=fake)["8.8.8.8"]
    assert r["times"] == [10.0, 500.0, 20.0]
    assert (r["sent"], r["received"], r["loss"]) == (3, 2, 0.3333)


def test_args_passed_to_runner():
    fake = FakeRunner(outputs=[""])
    fping(["1.1.1.1", "2001:db8::1"], Options(count=4, random=False), runner=fake)
    args = fake.calls[0]
    assert args[:2] == ["-A", "-q"]
    assert args[-2:] == ["1.1.1.1", "2001:db8::1"]
    assert "-R" not in args


def test_silent_host_is_absent():
    fake = FakeRunner(outputs=["1.1.1.1 : 5.0\n"])
    results = fping(["1.1.1.1", "8.8.8.8"], runner=fake)
    assert "8.8.8.8" not in results
    assert results.get("8.8.8.8") is None


def test_digits_flow_through_to_parser():
    fake = FakeRunner(outputs=["1.1.1.1 : 12.3456  -\n"])
    r = fping(["1.1.1.1"], {"digits": 1, "count": 2, "timeout": 100}, runner=fake)["1.1.1.1"]
    # a doubled separator leaves an empty token, which also counts as lost
    assert r["times"] == [12.3, 100.0, 100.0]


def test_invalid_option_spawns_nothing():
    fake = FakeRunner(outputs=["1.1.1.1 : 1\n"])
    with pytest.raises(InvalidOption):
        fping(["1.1.1.1"], {"bytes": 39}, runner=fake)
    assert fake.calls == []


def test_invalid_target_spawns_nothing():
    fake = FakeRunner()
    with pytest.raises(InvalidTarget, match="999.999.999.999"):
        fping(["999.999.999.999"], runner=fake)
    assert fake.calls == []


def test_missing_tool_spawns_nothing():
    fake = FakeRunner(available=False)
    with pytest.raises(ToolNotFound):
        PingController(fake).run(["1.1.1.1"])
    assert fake.calls == []


def test_validation_runs_before_locate():
    fake = FakeRunner(available=False)
    with pytest.raises(InvalidOption):
        fping(["1.1.1.1"], {"count": 0}, runner=fake)


def test_async_fping():
    fake = FakeRunner(outputs=["1.1.1.1 : 3.0 4.0\n"])
    results = asyncio.run(async_fping(["1.1.1.1"], {"count": 2}, runner=fake))
    assert results["1.1.1.1"]["avg"] == 3.5
