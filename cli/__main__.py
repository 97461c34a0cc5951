"""Command line entry point: python -m cli [--server URL] [--user NAME]."""

import argparse
import sys

from cli.api_client import FocalAPIClient
from cli.console import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='focal', description='Type Irish sentences letter by letter')
    parser.add_argument('--server', default='http://localhost:8000', help='focal server URL')
    parser.add_argument('--user', default='default', help='whose progress to load and save')
    parser.add_argument('--users', action='store_true', help='list users with saved progress and exit')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    ui = ConsoleUI(FocalAPIClient(base_url=args.server, user_id=args.user))

    try:
        if args.users:
            ui.print_users()
        else:
            ui.run()
    except KeyboardInterrupt:
        print('\nSlán!')
    return 0


if __name__ == '__main__':
    sys.exit(main())
