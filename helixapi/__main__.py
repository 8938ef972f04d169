#!/usr/bin/env python3
"""
helixapi CLI - Clips Helix en ligne de commande

    python -m helixapi clips broadcaster 125328655 --limit 20
    python -m helixapi clips game 509658 --after <cursor>
    python -m helixapi clips ids AwkwardHelplessSalamanderSwiftRage
    python -m helixapi clips create 125328655 --delay
    python -m helixapi scopes
"""

import argparse
import asyncio
import logging
import sys

from helixapi.client import HelixClient
from helixapi.config import DEFAULT_CONFIG_PATH, HelixConfig
from helixapi.errors import TwitchAPIException
from helixapi.pagination import HelixPaginatedResult, HelixPagination
from helixapi.resources.clips import HelixClipCreateParams
from helixapi.scope_validator import ScopeValidator

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="helixapi", description="Twitch Helix clips client")
    parser.add_argument(
        '--config',
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to config file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='DEBUG logging')

    commands = parser.add_subparsers(dest='command', required=True)

    clips = commands.add_parser('clips', help='List or create clips')
    clip_commands = clips.add_subparsers(dest='clip_command', required=True)

    for name, help_text in (('broadcaster', 'Clips of a broadcaster'), ('game', 'Clips of a game')):
        sub = clip_commands.add_parser(name, help=help_text)
        sub.add_argument('id', help='Broadcaster or game ID')
        sub.add_argument('--after', help='Forward cursor')
        sub.add_argument('--before', help='Backward cursor')
        sub.add_argument('--limit', type=int, help='Clips per page (max 100)')

    by_ids = clip_commands.add_parser('ids', help='Clips by ID')
    by_ids.add_argument('ids', nargs='+', help='Clip IDs')

    create = clip_commands.add_parser('create', help='Create a clip of a live stream')
    create.add_argument('channel_id', help='Broadcaster ID')
    create.add_argument('--delay', action='store_true', help='Account for the player delay')

    commands.add_parser('scopes', help='Validate the configured token')
    return parser


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
        force=True
    )


def print_clips(result: HelixPaginatedResult) -> None:
    for clip in result.data:
        print(f"{clip.id}  {clip.views:>8} views  {clip.title}  {clip.url}")
    print(f"cursor: {result.cursor or '-'}")


async def run(args: argparse.Namespace, config: HelixConfig) -> int:
    async with HelixClient.from_config(config) as client:
        if args.command == 'scopes':
            analysis = await ScopeValidator.validate_token(config.access_token, http_client=client.http_client)
            ScopeValidator.print_scope_report(analysis)
            return 0 if analysis["valid"] else 1

        if args.clip_command == 'create':
            if config.scopes is None:
                await client.resolve_scopes()
            clip_id = await client.clips.create_clip(
                HelixClipCreateParams(channel_id=args.channel_id, create_after_delay=args.delay)
            )
            print(clip_id)
            return 0

        if args.clip_command == 'ids':
            result = await client.clips.get_clips_by_ids(args.ids)
        else:
            pagination = HelixPagination(after=args.after, before=args.before, limit=args.limit)
            if args.clip_command == 'broadcaster':
                result = await client.clips.get_clips_for_broadcaster(args.id, pagination)
            else:
                result = await client.clips.get_clips_for_game(args.id, pagination)

        print_clips(result)
        return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = HelixConfig.load(args.config)
    except (FileNotFoundError, ValueError) as e:
        LOGGER.error(f"❌ Config invalide: {e}")
        return 2

    try:
        return asyncio.run(run(args, config))
    except TwitchAPIException as e:
        LOGGER.error(f"❌ Erreur Helix: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
