"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from domain.exceptions import TrackerError

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RED = "\033[91m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_banner() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 60)
    print(_g(div))
    print(_g("  LEAGUE OF LEGENDS RANK TRACKER"))
    print(_c("  Rank snapshots, LP deltas and match rollups"))
    print(_g(div))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tracker", description="League of Legends rank tracker")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("seed", help="Upsert configured accounts and resolve their PUUIDs")
    refresh = sub.add_parser("refresh", help="Refresh rank and recent matches")
    refresh.add_argument("slug", nargs="?", help="Only refresh this account")
    refresh.add_argument("--json", action="store_true", help="Print the results as JSON")
    profile = sub.add_parser("profile", help="Print an account profile as JSON")
    profile.add_argument("slug")
    sub.add_parser("champions", help="Reload the champion catalog from Data Dragon")
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    # Lazy imports here, the menu only needs the command classes it runs
    from presentation.cli import SeedCommand, RefreshCommand, ProfileCommand, ChampionsCommand

    if args.command == "seed":
        return asyncio.run(SeedCommand().run())
    if args.command == "refresh":
        return asyncio.run(RefreshCommand(json_out=args.json).run(args.slug))
    if args.command == "profile":
        return ProfileCommand().run(args.slug)
    if args.command == "champions":
        return asyncio.run(ChampionsCommand().run())
    raise ValueError(f"Unknown command: {args.command}")


def _menu() -> int:
    _print_banner()
    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Seed accounts")
        print(f"  {_c('2')}  Refresh all accounts")
        print(f"  {_c('3')}  Show profile")
        print(f"  {_c('4')}  Reload champions")
        print(f"  {_c('5')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = input("  Choose: ").strip()

        if choice == "1":
            args = argparse.Namespace(command="seed")
        elif choice == "2":
            args = argparse.Namespace(command="refresh", slug=None, json=False)
        elif choice == "3":
            args = argparse.Namespace(command="profile", slug=input("  Slug: ").strip())
        elif choice == "4":
            args = argparse.Namespace(command="champions")
        elif choice == "5":
            print(f"\n  {_g('Goodbye!')}\n")
            return 0
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")
            continue
        _run(args)


def _run(args: argparse.Namespace) -> int:
    try:
        return _dispatch(args)
    except (TrackerError, ValueError) as exc:
        print(f"  {_RED}{exc}{_RESET}")
        return 1


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="tracker",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="tracker.jsonl",
    )
    try:
        args = _build_parser().parse_args(argv)
        if args.command is None:
            return _menu()
        return _run(args)
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
