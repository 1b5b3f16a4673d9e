# tools/run_fping.py
# Usage examples:
#   python3 -m tools.run_fping 1.1.1.1 8.8.8.8
#   python3 -m tools.run_fping 1.1.1.1 8.8.8.8 --count 5 --timeout 300 --digits 2
#   python3 -m tools.run_fping fake --count 3

import argparse
import json
import logging
import subprocess
import sys

from fping_stats import FakeRunner, FpingError, FpingRunner, Options, fping


def fake_output(targets, count):
    # every target answers except the second probe, which is lost
    lines = []
    for i, t in enumerate(targets):
        samples = [f"{10.0 + i + n:.2f}" if n != 1 else "-" for n in range(count)]
        lines.append(f"{t} : {' '.join(samples)}")
    return "\n".join(lines) + "\n"


def options_from_args(args) -> Options:
    return Options(
        bytes=args.bytes,
        backoff=args.backoff,
        count=args.count,
        interval=args.interval,
        period=args.period,
        retry=args.retry,
        random=args.random,
        timeout=args.timeout,
        digits=args.digits,
        loss_digits=args.loss_digits,
    )


def build_argparser():
    d = Options()
    ap = argparse.ArgumentParser(description="fping runner with per-target latency statistics")
    ap.add_argument("targets", nargs="*", help="IPv4/IPv6 addresses (or 'fake' to use canned output)")
    ap.add_argument("--bytes", type=int, default=d.bytes, help="Ping payload size in bytes")
    ap.add_argument("--backoff", type=float, default=d.backoff, help="Exponential backoff factor")
    ap.add_argument("--count", type=int, default=d.count, help="Pings per target")
    ap.add_argument("--interval", type=int, default=d.interval, help="Milliseconds between any two pings")
    ap.add_argument("--period", type=int, default=d.period, help="Milliseconds between pings to one target")
    ap.add_argument("--retry", type=int, default=d.retry, help="Retries per ping")
    ap.add_argument("--timeout", type=int, default=d.timeout, help="Per-ping timeout in milliseconds")
    ap.add_argument("--digits", type=int, default=d.digits, help="Decimal places for latencies")
    ap.add_argument("--loss-digits", type=int, default=d.loss_digits, help="Decimal places for loss")
    ap.add_argument("--no-random", dest="random", action="store_false", default=d.random,
                    help="Don't randomize the payload")
    ap.add_argument("--fping-bin", default="fping", help="fping binary name or path")
    ap.add_argument("--use-sudo", action="store_true", default=False, help="Run fping through sudo -n")
    ap.add_argument("--process-timeout", type=float, default=None, help="Kill fping after this many seconds")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.targets == ["fake"]:
        targets = ["1.1.1.1", "8.8.8.8"]
        runner = FakeRunner(outputs=[fake_output(targets, args.count)])
    elif not args.targets:
        ap.error("Provide one or more targets (e.g., 8.8.8.8) or 'fake'")
    else:
        targets = args.targets
        runner = FpingRunner(args.fping_bin, use_sudo=args.use_sudo,
                             process_timeout=args.process_timeout)

    try:
        res = fping(targets, options_from_args(args), runner=runner)
    except FpingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except subprocess.TimeoutExpired as e:
        print(f"error: fping did not finish within {e.timeout} seconds", file=sys.stderr)
        return 2
    print(json.dumps(res, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
