#!/usr/bin/env python3
"""
cli.py — Command line for the SecureChannel protocol

Usage:
  securechannel                     Run the built-in demonstration
  securechannel INPUT OUTPUT        Read parameters from INPUT, write results to OUTPUT
  securechannel --generate BITS     Print a fresh parameter line
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import DEMO_PARAMS, RECOVERY_ROLES
from .errors import SecureChannelError
from .keygen import generate_params
from .transcript import OUTPUT_FORMATS, load_params, render, run_session, write_transcript

logger = logging.getLogger(__name__)


def _fail_with_error(err: SecureChannelError) -> None:
    """Print a structured error message from a ``SecureChannelError`` and exit.

    Args:
        err: Structured protocol/input error.

    Returns:
        None: This function terminates the process.
    """
    context = f" Context: {err.context}." if err.context else ""
    print(
        f"ERROR: {err.code}. {err.message}.{context} "
        f"Fix: correct the parameters and retry the command. "
        f"(See: securechannel --help)"
    )
    sys.exit(1)


def _cli_error(what: str, why: str, fix: str, see: str) -> None:
    """Print a teaching-style CLI error and exit.

    Args:
        what: What failed.
        why: Why it failed.
        fix: Recommended remediation.
        see: Command or option reference.

    Returns:
        None: This function terminates the process.
    """
    print(f"ERROR: {what}. {why}. Fix: {fix}. (See: {see})")
    sys.exit(1)


def cmd_demo(args: argparse.Namespace) -> None:
    """Run the demonstration parameters and print the transcript."""
    try:
        transcript = run_session(DEMO_PARAMS, recover_with=args.recover_with)
    except SecureChannelError as err:
        _fail_with_error(err)
    print(render(transcript, args.format))


def cmd_run(args: argparse.Namespace) -> None:
    """Read seven parameters from ``args.input`` and write the transcript."""
    try:
        params = load_params(args.input)
        logger.debug("Loaded parameters from %s", args.input)
        transcript = run_session(params, recover_with=args.recover_with)
    except SecureChannelError as err:
        _fail_with_error(err)
    try:
        out = write_transcript(args.output, transcript, args.format)
    except OSError as exc:
        _cli_error(
            "Could not write output file",
            f"{exc.strerror or exc} for {args.output}",
            "choose a writable OUTPUT path",
            "securechannel --help",
        )
    print(f"Results written to: {out}")


def cmd_generate(args: argparse.Namespace) -> None:
    try:
        params = generate_params(args.generate)
    except ValueError as exc:
        _cli_error(
            "Parameter generation failed",
            str(exc),
            "request a larger modulus size",
            "securechannel --generate",
        )
    print(params.to_line())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="securechannel",
        description="SecureChannel three-party signing protocol CLI",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="INPUT OUTPUT file paths")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output encoding")
    parser.add_argument(
        "--recover-with",
        choices=RECOVERY_ROLES,
        default="signer",
        help="Whose key the Receiver uses to recover the message",
    )
    parser.add_argument(
        "--generate",
        type=int,
        metavar="BITS",
        help="Print a fresh comma-separated parameter line with a BITS-bit modulus",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.generate is not None:
        cmd_generate(args)
    elif len(args.paths) == 0:
        cmd_demo(args)
    elif len(args.paths) == 2:
        args.input, args.output = args.paths
        cmd_run(args)
    else:
        _cli_error(
            "Wrong number of arguments",
            f"expected 0 or 2 paths, got {len(args.paths)}",
            "pass INPUT OUTPUT, or nothing to run the demonstration",
            "securechannel --help",
        )


if __name__ == "__main__":
    main()
