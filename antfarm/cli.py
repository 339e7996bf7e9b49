"""Command line entry: read a farm from standard input and march the ants."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from antfarm.ants import run_ants
from antfarm.farm import FarmError
from antfarm.lines import read_lines
from antfarm.paths import collect_paths
from antfarm.printing import format_paths, format_task, format_turn
from antfarm.reading import read_farm

RED = "\033[31;1m"
RESET = "\x1b[0m"

USAGE = (
    "Usage:\n\t-r - show just result\n"
    "\t-p - show steps counting\n\t-n - don't show moves\n"
    "\t-l - show leaks\n"
)


@dataclass
class Options:
    """What the command was asked to show."""

    just_steps: bool = False
    print_paths: bool = False
    hide_moves: bool = False
    print_leaks: bool = False
    show_help: bool = False


def parse_options(argv: Sequence[str]) -> Options:
    """Read the flags; unknown arguments are ignored, '-help' stops the scan."""
    options = Options()
    for arg in argv:
        if arg == "-r":
            options.just_steps = True
        elif arg == "-p":
            options.print_paths = True
        elif arg == "-n":
            options.hide_moves = True
        elif arg == "-l":
            options.print_leaks = True
        elif arg == "-help":
            options.show_help = True
            break
    return options


def _show_leaks() -> None:
    try:
        subprocess.run(["leaks", "lem-in"], check=False)
    except OSError:
        pass


def _run(options: Options) -> None:
    farm = read_farm(read_lines(sys.stdin))
    if farm.start_room() is None or farm.end_room() is None:
        raise FarmError("Commands are wrong")
    paths = collect_paths(farm)
    if not paths:
        raise FarmError("There are no connection between start and finish")
    show_moves = not options.just_steps and not options.hide_moves
    out = sys.stdout
    if show_moves:
        out.write(format_task(farm.text))
    if not options.just_steps and options.print_paths:
        out.write(format_paths(paths, not options.hide_moves))
    turns = run_ants(farm.ant_num, paths)
    if show_moves:
        for turn in turns:
            out.write(format_turn(turn))
    if options.just_steps:
        out.write(f"{len(turns)}\n")
    elif options.print_paths:
        out.write(f"\n{'-' * 27}\nResult: {len(turns)} steps\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 on success and 1 when the farm is invalid."""
    options = parse_options(sys.argv[1:] if argv is None else argv)
    if options.show_help:
        sys.stdout.write(USAGE)
        return 0
    try:
        _run(options)
    except FarmError as exc:
        if options.print_leaks:
            _show_leaks()
        sys.stdout.write(f"{RED}{exc}{RESET}\n")
        return 1
    if options.print_leaks:
        _show_leaks()
    return 0


if __name__ == "__main__":
    sys.exit(main())