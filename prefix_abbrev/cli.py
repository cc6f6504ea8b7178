import sys
import logging
import argparse
from functools import partial
from argparse import RawTextHelpFormatter

from .tokenizer import DEFAULT_SEP, split_sequence, join_sequence
from .abbreviation import abbreviate
from .common import common_parent, join_directory, shortest_abbreviations
from .sequence_pack import load_sequences

logger = logging.getLogger(__name__)

# Cleaner help display
MyFormatter = partial(RawTextHelpFormatter, max_help_position=60, width=100)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="prefix-abbrev",
        description=(
            "Unique prefixes CLI\n\n"
            "Print the shortest prefix of each path that no other path shares.\n"
        ),
        formatter_class=MyFormatter,
        epilog=(
            "Usage examples:\n"
            "Abbreviate a few paths:\n"
            "\tprefix-abbrev /home/user1/tmp/coverage/test /home/user1/tmp/covert/operator\n\n"
            "Find the common directory:\n"
            "\tprefix-abbrev --common /home/user1/tmp/coverage/test /home/user1/tmp/coven/members\n\n"
            "Read paths from a .json list or a text file (one per line):\n"
            "\tprefix-abbrev --file data/paths.json --shortest\n\n"
            "Dotted names instead of paths:\n"
            "\tprefix-abbrev --sep . os.path.join os.path.split os.environ\n"
        )
    )

    # Inputs given on the command line
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="sequences to abbreviate, split on --sep"
    )

    # Inputs from a sequence pack
    parser.add_argument(
        "-f", "--file",
        type=str,
        metavar="FILE",
        help="read more sequences from a .json list or a text file (one per line)"
    )

    # Token separator
    parser.add_argument(
        "-s", "--sep",
        type=str,
        default=DEFAULT_SEP,
        metavar="SEP",
        help=f"token separator (default: '{DEFAULT_SEP}')"
    )

    # Output modes
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--shortest",
        action="store_true",
        help="only print the abbreviations of minimal length"
    )
    mode.add_argument(
        "--common",
        action="store_true",
        help="print the common directory (shortest abbreviation minus its last component)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging"
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s: %(message)s',
    )

    if not args.sep:
        parser.error("--sep must not be empty")

    # LOAD INPUTS
    sequences = [split_sequence(p, args.sep) for p in args.paths]
    if args.file:
        try:
            sequences.extend(load_sequences(args.file, sep=args.sep))
        except (OSError, ValueError) as e:
            logger.error(str(e))
            return 1

    if not sequences:
        parser.error("no input: give PATH arguments or --file")

    logger.debug(f"Abbreviating {len(sequences)} sequences")

    # COMMON DIRECTORY
    if args.common:
        print(join_directory(common_parent(sequences), args.sep))
        return 0

    # ABBREVIATIONS
    abbrevs = abbreviate(sequences)
    if args.shortest:
        abbrevs = shortest_abbreviations(abbrevs)

    for abbrev in abbrevs:
        print(join_sequence(abbrev, args.sep))

    return 0


if __name__ == "__main__":
    sys.exit(main())
