# src/nearprime/cli.py

"""
nearprime - primes and semiprimes near a 64-bit unsigned integer

Description:
    For an integer n in 0..2**64-1 prints the previous and next prime (with
    timings), the least prime factor and a nearby semiprime. The `report`
    command prints the fixture table sampling the whole uint64 range.

usage: see nearprime -h
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import textwrap
import traceback
from importlib.resources import files as pkg_files

from colorama import Fore, Style
from colorama import init as colorama_init

from nearprime import __version__ as _ver
from nearprime import config as CONFIG
from nearprime.expreval import parse_u64
from nearprime.output_manager import OutputManager
from nearprime.report import gen_targets, neighborhood, render_neighborhood, render_report, report_lines
from nearprime.runtime import APPLY, CFG, ensure_runtime_deps
from nearprime.runtime import current as _rt_current
from nearprime.utility import (
    PrimeRangeError,
    UserInputError,
    flatten_dotted,
    typename,
    validate_output_setting,
)
from nearprime.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir

COMMANDS = ("report", "init", "where", "profiles")


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    try:
        faulthandler.enable()
    except (OSError, ValueError):
        pass  # stderr has no file descriptor (redirected or captured)

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      report
          Print the fixture table: previous prime, value and nearby semiprime
          for 12 and REPORT.STEPS evenly spaced points of the uint64 range.

      init [overwrite]
          Create the workspace and copy the sample profiles if missing
          (or replace them with 'overwrite').

      where
          Show the workspace and package paths.

      profiles
          List the available profiles.

    integers may be written as 1_000_000, 0xFFFF, 2**64-1 or 10^18+9.
    """)

    p = argparse.ArgumentParser(
        prog="nearprime",
        description="Primes and semiprimes near a 64-bit unsigned integer",
        usage=(
            "nearprime integer [--profile NAME] [--output FILE] [--quiet] [--debug]\n"
            "       nearprime report|init|where|profiles [--profile NAME] [--output FILE]\n"
            "       nearprime -h | --help"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("items", nargs="+", metavar="integer|command",
                   help="an integer in 0..2**64-1, or one of: " + ", ".join(COMMANDS))
    p.add_argument("--profile", default=None, help="Profile name (default: last used, else 'default')")
    p.add_argument("--output", default=None, help="Append results to a file (also prints unless --quiet)")
    p.add_argument("--quiet", action="store_true", help="Do not print results to the screen")
    p.add_argument("--debug", action="store_true", help="Show search timings and internal trace info")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except PrimeRangeError as e:
        _print_user_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = "--debug" in (argv if argv is not None else sys.argv)
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


def _select_profile_name(explicit: str | None) -> str:
    """
    Precedence:
      1) explicit --profile
      2) last used (from workspace)
      3) 'default'
    """
    if explicit:
        return explicit
    last = CONFIG.read_current_profile()
    if last and CONFIG.has_profile(last):
        return last
    return "default"


def _apply_profile(name: str, *, explicit: bool, debug: bool) -> None:
    if explicit and not CONFIG.has_profile(name):
        available = ", ".join(CONFIG.list_all_profiles()) or "(none)"
        raise UserInputError(f"Unknown profile: '{name}'. Available profiles: {available}")
    if not CONFIG.has_profile(name):
        return  # no profiles at all: run on built-in defaults

    selected = CONFIG.load_settings(name)
    APPLY(selected)
    if explicit:
        CONFIG.write_current_profile(name)
    if debug:
        _rt_current().debug = True
        print(f"[debug] active profile: {selected.name} ({selected._source})", file=sys.stderr)
        flat = flatten_dotted(selected.as_dict())
        for k in sorted(flat, key=str.lower):
            v = CFG(k, None)
            print(f"        {k:.<40} {v!r} ({typename(v)})", file=sys.stderr)


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)
    rt = _rt_current()
    rt.debug = bool(args.debug)

    _install_loud_error_handlers(args.debug)

    if not ensure_runtime_deps(strict=True):
        return 1

    command = args.items[0].strip().lower()
    extra = args.items[1:]

    if command == "init":
        overwrite = extra == ["overwrite"]
        if extra and not overwrite:
            parser.error("init takes at most one argument: overwrite")
        ws, copied = seed_workspace(overwrite=overwrite)
        note = " (overwrote existing files)" if overwrite else ""
        print(f"Workspace ready at: {ws}{note}")
        print(f"Copied -> profiles: {copied.get('profiles', 0)}")
        return 0

    if extra:
        parser.error(f"unexpected arguments: {' '.join(extra)}")

    ensure_workspace_seeded()

    if command == "where":
        print(f"Workspace: {workspace_dir()}")
        print(f"Package:   {pkg_files('nearprime')}")
        return 0

    if command == "profiles":
        for name, desc in CONFIG.list_profiles_with_descriptions():
            print(f"{Fore.YELLOW}{name:<12}{Style.RESET_ALL} {desc}")
        return 0

    _apply_profile(_select_profile_name(args.profile), explicit=bool(args.profile), debug=args.debug)

    # --- output routing (CLI --output overrides profile OUTPUT_FILE) ---
    try:
        target = validate_output_setting(args.output) or CFG("OUTPUT.OUTPUT_FILE", None)
    except ValueError as e:
        raise UserInputError(f"--output: {e}") from None

    if command == "report":
        with OutputManager(output_file=target, quiet=args.quiet) as om:
            render_report(report_lines(gen_targets()), om)
        return 0

    n = parse_u64(args.items[0])
    with OutputManager(output_file=target, quiet=args.quiet) as om:
        render_neighborhood(neighborhood(n), om)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
