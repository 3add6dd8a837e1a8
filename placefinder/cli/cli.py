"""
cli.py - command line front end
Features:
- `lookup`: current time for a city, a country (name or ISO code) or a zone
- partial and misspelled names give a numbered pick list
- `config show|set`: inspect and change the JSON config
- Uses Rich for tables and prompts
"""

import argparse
import sys
from typing import List, Optional, Sequence

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from placefinder.core.clock import format_time
from placefinder.core.errors import PlaceFinderError
from placefinder.core.resolver import (
    ABBREVIATION_MAX_LEN,
    describe,
    find_locations,
    zone_to_timezone,
)
from placefinder.utils.config_manager import Config
from placefinder.utils.logger_utils import setup_logging

# initialise console for rich output
console = Console()

USAGE_HINT = " Usage: placefinder lookup [options] [city]"


class CLI:
    """Runs one lookup: search, let the user pick if needed, print the time table."""

    def __init__(self, cfg: Config, out: Optional[Console] = None, interactive: bool = True):
        self.cfg = cfg
        self.console = out or console
        self.interactive = interactive

    # LOOKUP -----------------------------------------------------------
    def lookup(self, city: str = "", country: str = "", tz: str = "", zone: str = "") -> int:
        """
        Exactly one of city/country/tz/zone must be given.
        Returns a process exit code.
        """
        given = [v for v in (city, country, tz, zone) if v]
        if len(given) != 1:
            msg = "Incomplete command" if not given else "Use only one of [--tz, -z, --country] or [city]"
            self.console.print(f"\n Error: {escape(msg)}")
            self.console.print(escape(USAGE_HINT))
            return 2

        if tz or zone:
            self._show_zone(tz or zone)
            return 0

        matches = find_locations(
            city=city,
            country=country,
            limit=int(self.cfg["max_suggestions"]),
            full_scan=bool(self.cfg["full_scan_fallback"]),
        )
        if len(matches) == 1:
            self._show_location(matches[0])
            return 0

        choice = self._choose("Select one location:", matches)
        if choice:
            self._show_location(choice)
        return 0

    # DISPLAY ----------------------------------------------------------------
    def _show_location(self, name: str) -> None:
        info = describe(name)
        tz = info.timezone
        if info.ambiguous:
            tz = self._choose(f"Select one timezone for {name}:", list(info.timezones))
            if not tz:
                return

        table = Table(box=box.SQUARE)
        table.add_column("Location", style="bold")
        table.add_column("TimeZone", style="cyan")
        table.add_column("Country")
        table.add_column("Date/Time", style="magenta")
        table.add_row(escape(info.name), tz, escape(info.country), self._time(tz))
        self.console.print(table)

    def _show_zone(self, zone: str) -> None:
        tz = zone_to_timezone(zone)
        table = Table(box=box.SQUARE)
        table.add_column("TimeZone", style="cyan")
        table.add_column("Date/Time", style="magenta")
        row = [tz, self._time(tz)]
        if len(zone) <= ABBREVIATION_MAX_LEN:
            table.add_column("Zone Abbr.")
            row.append(zone)
        table.add_row(*row)
        self.console.print(table)

    def _time(self, tz: str) -> str:
        return format_time(tz, self.cfg["time_format"])

    def _choose(self, title: str, options: Sequence[str]) -> Optional[str]:
        """
        Show a numbered list and ask for a number.
        Non-interactive runs only print the list.
        """
        # title printed on its own line: a table title would wrap to the table width
        self.console.print(f"[bold]{escape(title)}[/bold]")
        table = Table(box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Name", style="bold")
        for i, opt in enumerate(options, 1):
            table.add_row(str(i), escape(opt))
        self.console.print(table)

        if not self.interactive:
            return None

        chosen = Prompt.ask("Pick #", default="", console=self.console)
        if not chosen:
            self.console.print("Don't wanna check time? That's cool.")
            return None
        if chosen.isdigit() and 1 <= int(chosen) <= len(options):
            return options[int(chosen) - 1]
        self.console.print(f"[red]Invalid choice:[/red] {escape(chosen)}")
        return None

    # CONFIG ------------------------------------------------------------------
    def show_config(self) -> int:
        table = Table(title=f"Config ({escape(self.cfg.path)})", box=box.MINIMAL)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.data.items():
            table.add_row(k, escape(str(v)))
        self.console.print(table)
        return 0

    def set_config(self, key: str, value: str) -> int:
        try:
            val = self.cfg.set(key, value)
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {escape(key)}")
            return 1
        except ValueError as e:
            self.console.print(f"[red]Bad value for {escape(key)}:[/red] {escape(str(e))}")
            return 1
        self.console.print(f"[green]{escape(key)}[/green] = {escape(str(val))}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="placefinder",
        description="Look up the current time for a city, country or zone.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    parser.add_argument("--config", default=None, help="path to the JSON config file")
    sub = parser.add_subparsers(dest="command")

    lookup = sub.add_parser(
        "lookup",
        help="current time for a city, country or zone",
        epilog='examples: placefinder lookup "New York" | --tz=America/New_York | -z pst | --country NP',
    )
    lookup.add_argument("city", nargs="*", help="city name or prefix (words are joined)")
    lookup.add_argument("--tz", default="", help="timezone name like Asia/Kathmandu")
    lookup.add_argument("-z", "--zone", default="", help="zone abbreviation like pst")
    lookup.add_argument("-c", "--country", default="", help="country name, prefix or ISO code")
    lookup.add_argument("--no-input", action="store_true", help="print choices instead of prompting")

    cfg = sub.add_parser("config", help="show or change settings")
    cfg_sub = cfg.add_subparsers(dest="action")
    cfg_sub.add_parser("show", help="print current settings")
    set_p = cfg_sub.add_parser("set", help="change one setting")
    set_p.add_argument("key")
    set_p.add_argument("value")
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or console

    cfg = Config(args.config)
    setup_logging("DEBUG" if args.verbose else cfg["log_level"])

    if args.command is None:
        parser.print_help()
        return 2

    cli = CLI(cfg, out=out, interactive=not getattr(args, "no_input", False))
    try:
        if args.command == "lookup":
            return cli.lookup(city=" ".join(args.city), country=args.country,
                              tz=args.tz, zone=args.zone)
        if args.action == "set":
            return cli.set_config(args.key, args.value)
        return cli.show_config()
    except PlaceFinderError as e:
        out.print(f"\n[red]Error:[/red] {escape(str(e))}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
