"""
Command-line interface for the Transmission RPC client.

Takes exactly one action per invocation, chosen by the first action flag
set in this order: list, start, startnow, stop, remove, verify, reannounce.

Usage:
    transmission-api --address localhost:9091 --list
    transmission-api --address localhost:9091 --stop 3
    transmission-api --remove 3 --delete-data
"""

import argparse
import sys

from .client import TransmissionClient
from .config import Config
from .errors import TransmissionError
from .logger import setup_cli_logging


def print_torrents(torrents):
    for torrent in torrents:
        print(f"{torrent.id}: (Status {torrent.status}) (Done: {torrent.percent_complete:.2f}) {torrent.name}")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Control a Transmission daemon over RPC",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --list
  %(prog)s --address nas:9091 --username me --password secret --start 4
  %(prog)s --remove 4 --delete-data
"""
    )
    parser.add_argument("--address", default=Config.TRANSMISSION_ADDRESS,
                        help="Transmission address")
    parser.add_argument("--username", default=Config.TRANSMISSION_USERNAME,
                        help="Transmission username")
    parser.add_argument("--password", default=Config.TRANSMISSION_PASSWORD,
                        help="Transmission password")
    parser.add_argument("--verbose", action="store_true",
                        help="Log to standard error")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    parser.add_argument("--list", action="store_true", help="List all torrents")
    parser.add_argument("--start", type=int, metavar="ID", help="Start a torrent")
    parser.add_argument("--startnow", dest="start_now", type=int, metavar="ID",
                        help="Start a torrent, bypassing the queue")
    parser.add_argument("--stop", type=int, metavar="ID", help="Stop a torrent")
    parser.add_argument("--remove", type=int, metavar="ID", help="Remove a torrent")
    parser.add_argument("--delete-data", action="store_true",
                        help="With --remove, also delete downloaded data")
    parser.add_argument("--verify", type=int, metavar="ID", help="Verify a torrent")
    parser.add_argument("--reannounce", type=int, metavar="ID",
                        help="Reannounce a torrent to its trackers")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_cli_logging(verbose=args.verbose)

    with TransmissionClient(args.address, args.username, args.password) as client:
        try:
            if args.list:
                print_torrents(client.list_all())

            elif args.start is not None:
                client.start([args.start])

            elif args.start_now is not None:
                client.start_now([args.start_now])

            elif args.stop is not None:
                client.stop([args.stop])

            elif args.remove is not None:
                client.remove([args.remove], delete_local_data=args.delete_data)

            elif args.verify is not None:
                client.verify([args.verify])

            elif args.reannounce is not None:
                client.reannounce([args.reannounce])

        except TransmissionError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
