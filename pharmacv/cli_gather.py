"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .logging_utils import VERBOSITY_NORMAL, VERBOSITY_QUIET, VERBOSITY_VERBOSE
from .shared import ViewMode


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.

    No side effects - just parsing and conversion to UserConfig.
    """
    parser = argparse.ArgumentParser(
        prog="pharmacv",
        description="Render a structured CV as an anonymous or full preview, card, HTML, Word or PDF document.",
        epilog="""
Examples:
  Anonymous preview as JSON:
    pharmacv --cv cv.json --profile profile.json

  Full HTML export with caller-supplied contact email:
    pharmacv --cv cv.json --profile profile.json \\
      --renderer html --mode full --email jane@example.com --output out/cv.html

  Anonymous PDF and conformance check:
    pharmacv --cv cv.json --renderer html --pdf out/cv.pdf --verify conformance

  List available renderers:
    pharmacv --list renderers
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--cv", help="Structured CV JSON file")
    parser.add_argument("--profile", help="Profile JSON file (name, city, region, photo, phone)")
    parser.add_argument("--renderer", default="preview",
                        help="Renderer name (see --list renderers). Default: preview")
    parser.add_argument("--mode", choices=[m.value for m in ViewMode], default=ViewMode.ANONYMOUS.value,
                        help="Projection mode. Default: anonymous")
    parser.add_argument("--title", help="Document title for the HTML/PDF export")
    parser.add_argument("--email", help="Contact email shown in full-mode exports")
    parser.add_argument("--now", type=_parse_day, help="Reference date YYYY-MM-DD (default: today)")
    parser.add_argument("--output", help="Output file. JSON and HTML go to stdout when omitted")
    parser.add_argument("--pdf", help="Also export the HTML document to this PDF file")
    parser.add_argument("--verify", nargs="*", metavar="NAME",
                        help="Run verifiers by name; all registered verifiers when no name is given")
    parser.add_argument("--list", dest="list_what", choices=["renderers", "verifiers"],
                        help="List registered renderers or verifiers and exit")

    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--verbosity", type=int, default=VERBOSITY_NORMAL,
                        choices=[VERBOSITY_QUIET, VERBOSITY_NORMAL, VERBOSITY_VERBOSE],
                        help="0=quiet, 1=normal, 2=verbose. Default: 1")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, all output is also written there.")

    args = parser.parse_args(argv)

    return UserConfig(
        cv=Path(args.cv) if args.cv else None,
        profile=Path(args.profile) if args.profile else None,
        renderer=args.renderer,
        mode=ViewMode(args.mode),
        title=args.title,
        email=args.email,
        now=args.now,
        output=Path(args.output) if args.output else None,
        pdf=Path(args.pdf) if args.pdf else None,
        verify=args.verify,
        list_what=args.list_what,
        debug=args.debug,
        verbosity=args.verbosity,
        log_file=args.log_file,
    )
