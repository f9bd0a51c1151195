"""Command-line options of the operator manager."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from sroperator.leaderelection import ManagerOptions, apply_openshift_options

__all__ = ["CommandLine", "CommandLineError", "parse_command_line", "main"]

log = logging.getLogger(__name__)

_METRICS_ADDR_HELP = "The address the metric endpoint binds to."
_LEADER_ELECTION_HELP = (
    "Enable leader election for controller manager. "
    "Enabling this will ensure there is only one active controller manager."
)

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}

_MANAGER_PORT = 9443


class CommandLineError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass
class CommandLine:
    """Parsed command-line options."""

    enable_leader_election: bool = False
    metrics_addr: str = ":8080"


def _usage(program_name: str) -> str:
    return (
        f"Usage of {program_name}:\n"
        f"  -enable-leader-election\n    \t{_LEADER_ELECTION_HELP}\n"
        f"  -metrics-addr string\n    \t{_METRICS_ADDR_HELP} (default \":8080\")\n"
    )


def _fail(program_name: str, message: str) -> CommandLineError:
    sys.stderr.write(f"{message}\n{_usage(program_name)}")
    return CommandLineError(message)


def _parse_bool(text: str, flag: str, program_name: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise _fail(program_name, f'invalid boolean value "{text}" for -{flag}: parse error')


def parse_command_line(program_name: str, args: Sequence[str] | None) -> CommandLine:
    """Parse flags the way a single- or double-dash flag set does.

    Parsing stops at the first non-flag argument or after ``--``.
    """
    cl = CommandLine()
    remaining = list(args or [])

    while remaining:
        arg = remaining[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        remaining.pop(0)
        if arg == "--":
            break

        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise _fail(program_name, f"bad flag syntax: {arg}")

        value: str | None = None
        if "=" in name:
            name, value = name.split("=", 1)

        if name == "enable-leader-election":
            cl.enable_leader_election = (
                True if value is None else _parse_bool(value, name, program_name)
            )
        elif name == "metrics-addr":
            if value is None:
                if not remaining:
                    raise _fail(program_name, f"flag needs an argument: -{name}")
                value = remaining.pop(0)
            cl.metrics_addr = value
        elif name in ("h", "help"):
            sys.stderr.write(_usage(program_name))
            raise CommandLineError("flag: help requested")
        else:
            raise _fail(program_name, f"flag provided but not defined: -{name}")

    return cl


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and prepare the manager options."""
    if argv is None:
        program_name, args = sys.argv[0], sys.argv[1:]
    else:
        program_name, args = "sroperator", list(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        cl = parse_command_line(program_name, args)
    except CommandLineError as err:
        log.error("could not parse command-line arguments: %s", err)
        return 1

    opts = ManagerOptions(metrics_bind_address=cl.metrics_addr, port=_MANAGER_PORT)
    if cl.enable_leader_election:
        opts.leader_election = True
        opts = apply_openshift_options(opts)

    log.info("starting manager with %s", opts)
    return 0