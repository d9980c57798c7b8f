# src/covsettings/cli.py

import argparse
import json
import platform
import sys
from difflib import get_close_matches
from pathlib import Path

from apathetic_logging import LEVEL_ORDER, safeLog

from .config import CoverageSettings, load_settings_file, resolve_settings
from .errors import CollectorError
from .logs import getAppLogger
from .meta import (
    DATA_COLLECTOR_NAME,
    PROGRAM_DISPLAY,
    PROGRAM_SCRIPT,
    get_metadata,
)


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        # Build known option strings: ["-v", "--verbose", "--log-level", ...]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # Argparse message for bad flags is typically
        # "unrecognized arguments: --setings ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description="Resolve code-coverage collector settings for a test run.",
    )

    parser.add_argument(
        "test_modules",
        nargs="*",
        metavar="TEST_MODULE",
        help="Test modules handed over by the test host (only the first is used).",
    )
    parser.add_argument(
        "-s",
        "--settings",
        help="Run settings file (.runsettings / .xml) or JSON configuration.",
    )
    parser.add_argument(
        "--collector",
        default=DATA_COLLECTOR_NAME,
        help=f"Data collector friendly name (default: {DATA_COLLECTOR_NAME!r}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved settings as JSON.",
    )

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _initialize_logger(args: argparse.Namespace) -> None:
    """Apply the CLI log level; env vars and defaults apply otherwise."""
    logger = getAppLogger()
    if args.log_level:
        logger.setLevel(args.log_level.upper())
    logger.trace("[BOOT] log-level initialized: %s", logger.levelName)

    logger.debug(
        "Runtime: Python %s (%s)\n    %s",
        platform.python_version(),
        platform.python_implementation(),
        sys.version.replace("\n", " "),
    )


def _render(settings: CoverageSettings, *, as_json: bool) -> str:
    if as_json:
        return json.dumps(settings.to_dict(), indent=2)
    return str(settings)


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = getAppLogger()  # init (use env + defaults)

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        _initialize_logger(args)

        if args.version:
            logger.info("%s %s", PROGRAM_DISPLAY, get_metadata())
            return 0

        configuration = None
        if args.settings:
            configuration = load_settings_file(
                Path(args.settings), collector_name=args.collector
            )
            logger.debug("Using settings: %s", args.settings)
            if configuration is None:
                logger.info(
                    "No configuration for %r in %s; using defaults.",
                    args.collector,
                    args.settings,
                )

        settings = resolve_settings(
            configuration, args.test_modules, collector_name=args.collector
        )
        # the record is the command's output, independent of log verbosity
        print(_render(settings, as_json=args.json))

    except (CollectorError, FileNotFoundError, ValueError, TypeError) as e:
        # controlled termination
        try:
            logger.errorIfNotDebug("%s", e)
        except Exception:  # noqa: BLE001
            safeLog(f"[FATAL] Logging failed while reporting: {e}")
        return getattr(e, "code", 1)

    except Exception as e:  # noqa: BLE001
        # unexpected internal error
        try:
            logger.criticalIfNotDebug("Unexpected internal error: %s", e)
        except Exception:  # noqa: BLE001
            safeLog(f"[FATAL] Logging failed while reporting: {e}")
        return getattr(e, "code", 1)

    else:
        return 0
