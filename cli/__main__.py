"""Entry point for the quest CLI client."""

import argparse
import sys

from cli.api_client import QuestAPIClient
from cli.console import ConsoleUI, GAME_ALIASES


def main():
    parser = argparse.ArgumentParser(description='Quest - timed English mini-games')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='User ID (default: default)'
    )
    parser.add_argument(
        '--game',
        choices=sorted(GAME_ALIASES),
        default='speed-verb',
        help='Game to play (default: speed-verb)'
    )
    parser.add_argument(
        '--difficulty',
        type=int,
        choices=[1, 2, 3],
        default=1,
        help='Speed Verb difficulty: 1 past simple, 2 adds past participle, 3 adds translation'
    )
    parser.add_argument(
        '--mode',
        choices=['exact', 'free'],
        default='exact',
        help='Wordfall mode (default: exact)'
    )
    parser.add_argument(
        '--length',
        type=int,
        choices=[4, 5, 6],
        default=5,
        help='Enigma Scroll word length (default: 5)'
    )
    args = parser.parse_args()

    client = QuestAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    try:
        ui.run(GAME_ALIASES[args.game], difficulty=args.difficulty, mode=args.mode,
               word_length=args.length)
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
