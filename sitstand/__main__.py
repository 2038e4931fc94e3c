import argparse
import logging
import sys
from sitstand.common.logger import log, set_level
from sitstand.core.config import DEFAULT_SITTING, DEFAULT_STANDING, POLL_INTERVAL, FixedSchedule
from sitstand.ui.app import main


def _positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number of minutes, got {value}")
    return number

def _positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number of seconds, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sitstand",
        description="Terminal reminder to alternate between sitting and standing.",
    )
    parser.add_argument("--sitting", type=_positive_int, metavar="MINUTES", default=None,
                        help=f"initial sitting interval (default {DEFAULT_SITTING // 60})")
    parser.add_argument("--standing", type=_positive_int, metavar="MINUTES", default=None,
                        help=f"initial standing interval (default {DEFAULT_STANDING // 60})")
    parser.add_argument("--poll", type=_positive_float, metavar="SECONDS", default=POLL_INTERVAL,
                        help=f"how often to check whether the interval ran out (default {POLL_INTERVAL})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="write debug output to the log files")
    return parser


# Entry point for `python -m sitstand` and the `sitstand` console script
def run(argv=None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(log, logging.DEBUG)
    try:
        main(FixedSchedule.from_minutes(args.sitting, args.standing), poll_interval=args.poll)
    except SystemExit:
        raise
    except KeyboardInterrupt:
        log.info("Interrupted, exiting")
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
