# tests/test_tool_unit.py
import json

from tools.run_fping import build_argparser, fake_output, main, options_from_args


def test_fake_output_shape():
    out = fake_output(["1.1.1.1"], 3)
    assert out == "1.1.1.1 : 10.00 - 12.00\n"


def test_argparser_maps_to_options():
    args = build_argparser().parse_args(["1.1.1.1", "--count", "4", "--loss-digits", "3", "--no-random"])
    o = options_from_args(args)
    assert (o.count, o.loss_digits, o.random) == (4, 3, False)
    assert o.timeout == 500


def test_main_fake(capsys):
    assert main(["fake", "--count", "3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert set(data) == {"1.1.1.1", "8.8.8.8"}
    assert data["8.8.8.8"]["received"] == 2


def test_main_reports_bad_target(capsys):
    assert main(["999.999.999.999"]) == 2
    assert "999.999.999.999" in capsys.readouterr().err


def test_main_reports_process_timeout(monkeypatch, capsys):
    import subprocess

    import tools.run_fping as run_fping

    def timed_out(targets, options=None, runner=None):
        raise subprocess.TimeoutExpired(["fping"], 1.5)

    monkeypatch.setattr(run_fping, "fping", timed_out)
    assert main(["1.1.1.1", "--process-timeout", "1.5"]) == 2
    assert "did not finish within 1.5 seconds" in capsys.readouterr().err
