"""
Command-line entry point for running impostor word rounds.
"""

import argparse
import os
from typing import List, Optional

from dotenv import load_dotenv

from impostor_words.config import RoomConfig, load_config, load_theme_catalog, save_config_to_yaml
from impostor_words.config.room_config import DEFAULT_BASE_URL
from impostor_words.core import (
    InvalidRoundParamsError,
    MalformedPayloadError,
    NotRegisteredError,
    PlayerAssignment,
    RosterWarning,
    ThemeCatalog,
    assign,
    build_payload,
    build_share_url,
    check_roster,
    encode,
    resolve_link,
)

load_dotenv()

EXIT_MALFORMED = 1
EXIT_NOT_REGISTERED = 2
EXIT_INVALID = 3


def default_base_url() -> str:
    return os.getenv("IMPOSTOR_WORDS_BASE_URL", DEFAULT_BASE_URL)


def _print_assignments(assignments: List[PlayerAssignment]) -> None:
    """Print the admin's assignment table."""
    if not assignments:
        print("Add player names to generate words & roles.")
        return
    width = max(len(a.name) for a in assignments)
    print(f"{'#':>3}  {'Player':<{width}}  {'Word':<14}  Role")
    print("-" * (width + 30))
    for idx, a in enumerate(assignments, start=1):
        print(f"{idx:>3}  {a.name:<{width}}  {a.word:<14}  {a.role}")


def _print_warning(warning: Optional[RosterWarning]) -> None:
    if warning:
        print(f"Warning: {warning.message}")


def run_admin(config: RoomConfig, catalog: ThemeCatalog) -> int:
    """Print the assignment table, payload and share link for the current round."""
    try:
        params = config.to_params()
        assignments = assign(config.roster, params, catalog)
    except InvalidRoundParamsError as e:
        print(f"[ADMIN] {e.message}")
        return EXIT_INVALID

    payload = build_payload(config.roster, params)
    pair = catalog[params.pair_index]

    print("=" * 60)
    print(f"[ADMIN] Room: {params.seed}  Round: {params.round_number}  Word refresh: {params.word_refresh}")
    print(f"[ADMIN] Theme: {pair.label}  Impostors: {params.impostor_count}  Players: {payload.roster_size}")
    print("=" * 60)
    _print_warning(check_roster(config.roster, params.impostor_count))
    _print_assignments(assignments)
    print()
    print(f"Payload: {encode(payload)}")
    print(f"Player link: {build_share_url(config.base_url, payload)}")
    return 0


def run_player(link: str, name: str, catalog: ThemeCatalog) -> int:
    """Resolve a player's word from a share link or payload."""
    try:
        result = resolve_link(link, name, catalog)
    except MalformedPayloadError as e:
        print(f"[PLAYER] {e.message}")
        return EXIT_MALFORMED
    except NotRegisteredError as e:
        print(f"[PLAYER] {e.message}")
        return EXIT_NOT_REGISTERED

    print(f"[PLAYER] Round {result.round_number} - Players joined: {result.roster_size}")
    print("(Don't show this to anyone else)")
    print()
    print(f"    {result.word}")
    print()
    return 0


def run_themes(catalog: ThemeCatalog) -> int:
    for idx, label in enumerate(catalog.labels()):
        print(f"{idx}: {label}")
    return 0


def _apply_admin_overrides(config: RoomConfig, args, catalog: ThemeCatalog) -> None:
    """Apply command-line settings and actions on top of the loaded config."""
    if args.new_room:
        config.new_room(catalog)
    if args.seed is not None:
        config.seed = args.seed
    if args.round is not None:
        config.round_number = args.round
    if args.impostors is not None:
        config.impostor_count = args.impostors
    if args.pair is not None:
        config.pair_index = args.pair
    if args.refresh is not None:
        config.word_refresh = args.refresh
    if args.base_url is not None:
        config.base_url = args.base_url
    for name in args.player or []:
        if not config.add_player(name):
            print(f"Warning: Skipping duplicate or blank name '{name}'")
    for name in args.remove or []:
        if not config.remove_player(name):
            print(f"Warning: '{name}' is not on the roster")
    if args.next_round:
        config.next_round(catalog)
    if args.refresh_words:
        config.refresh_words()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assign hidden impostor roles and secret words without a server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py admin -s room-42 -p Alice -p Bob -p Carol   # Roles, words and player link
  python main.py admin --config configs/example_room.yaml --next-round --save configs/example_room.yaml
  python main.py player "http://127.0.0.1:5000/?mode=player&payload=..." --name Alice
  python main.py themes                                      # List theme pairs
        """
    )
    parser.add_argument(
        "--themes",
        type=str,
        default=None,
        help="Path to a custom theme catalog YAML (admin and players must use the same one)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    admin = sub.add_parser("admin", help="Compute a round and print the player link")
    admin.add_argument("--config", "-c", type=str, default=None, help="Path to YAML room configuration")
    admin.add_argument("--seed", "-s", type=str, default=None, help="Room code")
    admin.add_argument("--round", "-r", type=int, default=None, help="Round number (default: 1)")
    admin.add_argument("--impostors", "-k", type=int, default=None, help="Number of impostors (default: 1)")
    admin.add_argument("--pair", type=int, default=None, help="Theme pair index (see 'themes')")
    admin.add_argument("--refresh", type=int, default=None, help="Word refresh counter")
    admin.add_argument("--player", "-p", action="append", help="Add a player (repeatable)")
    admin.add_argument("--remove", action="append", help="Remove a player (repeatable)")
    admin.add_argument("--base-url", type=str, default=None, help="Base URL for player links")
    admin.add_argument("--next-round", action="store_true", help="Advance to the next round")
    admin.add_argument("--refresh-words", action="store_true", help="Reshuffle words, keep roles")
    admin.add_argument("--new-room", action="store_true", help="Start a new room with a random code")
    admin.add_argument("--save", type=str, default=None, help="Write the resulting room configuration to YAML")

    player = sub.add_parser("player", help="Get your word from a player link")
    player.add_argument("link", type=str, help="Player link or bare payload")
    player.add_argument("--name", "-n", type=str, default=None, help="Your name as the admin entered it")

    sub.add_parser("themes", help="List theme pairs")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the command line."""
    args = build_parser().parse_args(argv)
    catalog = load_theme_catalog(args.themes)

    if args.command == "themes":
        return run_themes(catalog)

    if args.command == "player":
        name = args.name if args.name is not None else input("Your name: ")
        return run_player(args.link, name, catalog)

    config = load_config(args.config)
    if args.config is None:
        config.base_url = default_base_url()
    if args.themes is None and config.themes_path:
        catalog = load_theme_catalog(config.themes_path)
    _apply_admin_overrides(config, args, catalog)

    status = run_admin(config, catalog)
    if status == 0 and args.save:
        save_config_to_yaml(config, args.save)
        print(f"\nRoom configuration saved to: {args.save}")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
