"""CLI entrypoint for Odinpack."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from types import FrameType

from odinpack import __version__
from odinpack.bundle import pack_workspace
from odinpack.config import validate_config_file
from odinpack.constants.branding import CLI_DESCRIPTION
from odinpack.exceptions import ConfigError, OdinPackError, ToolMissingError
from odinpack.exceptions.validation import format_errors
from odinpack.io import write_json_atomic
from odinpack.reporting import StdoutReporter

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2
EXIT_INTERRUPTED: int = 130
EXIT_TERMINATED: int = 143


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="odinpack",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Working directory to pack (default: current directory)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit odinpack.yaml path")
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON run report to this path")
    parser.add_argument(
        "--validate-config",
        action="store_true",
        help="Validate configuration and exit without packing",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored summary output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging, including tool commands")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
        stream=sys.stdout,
    )

    validation_errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return EXIT_USAGE
    if args.validate_config:
        print("Configuration is valid.")
        return EXIT_OK

    previous_handler = signal.signal(signal.SIGTERM, _raise_terminated)
    try:
        result = pack_workspace(root=args.root, config_path=args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except ToolMissingError as exc:
        print(f"Missing tools: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except OdinPackError as exc:
        print(f"Packing error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted; partial outputs removed.", file=sys.stderr)
        return EXIT_INTERRUPTED
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    if args.report is not None:
        try:
            write_json_atomic(args.report, result.to_dict())
        except OSError as exc:
            print(f"Report error: cannot write {args.report}: {exc}", file=sys.stderr)
            return EXIT_FAILURE

    use_color = not args.no_color and sys.stdout.isatty()
    print(StdoutReporter(result, color=use_color).render())
    return EXIT_OK


def _raise_terminated(signum: int, frame: FrameType | None) -> None:
    """Turn SIGTERM into SystemExit so partial-output cleanup runs on the way out."""
    raise SystemExit(EXIT_TERMINATED)


if __name__ == "__main__":
    raise SystemExit(main())
