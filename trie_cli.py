"""Command-line front end for the trie dictionary."""

import argparse
import logging
import os
from typing import List, Optional

from trie_dictionary import EmptyQueryError, Trie

log = logging.getLogger("trie_dictionary.cli")

MAX_DISTANCE_ENV = "TRIE_MAX_EDIT_DISTANCE"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    The ``--max-distance`` default is read from the
    ``TRIE_MAX_EDIT_DISTANCE`` environment variable when it is set.

    Returns:
        argparse.ArgumentParser: The configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="trie-dictionary",
        description="Store words in a trie and query it for completions and spelling suggestions",
    )
    parser.add_argument("words", nargs="*", help="Words to insert")
    parser.add_argument("--delete", nargs="+", default=[], metavar="WORD",
                        help="Words to delete after inserting")
    parser.add_argument("--suggest", metavar="PREFIX",
                        help="Print every stored word starting with PREFIX")
    parser.add_argument("--spell", metavar="WORD",
                        help="Print stored words within --max-distance edits of WORD")
    parser.add_argument("--tree", action="store_true",
                        help="Print the trie structure")
    parser.add_argument("--max-distance", type=int,
                        default=os.environ.get(MAX_DISTANCE_ENV, "2"),
                        help=f"Edit distance limit for --spell (default: ${MAX_DISTANCE_ENV} or 2)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trie = Trie()
    for word in args.words:
        if not trie.insert(word):
            log.info("Skipped duplicate word %r", word)
    for word in args.delete:
        if not trie.delete(word):
            log.info("Cannot delete %r: not stored", word)
    log.debug("Trie holds %d words", len(trie))

    if args.suggest is None and args.spell is None and not args.tree:
        for word in trie:
            print(word)
        return 0

    if args.suggest is not None:
        for word in trie.auto_suggest(args.suggest):
            print(word)

    if args.spell is not None:
        try:
            suggestions = trie.get_spelling_suggestions(args.spell, args.max_distance)
        except EmptyQueryError:
            parser.error("--spell needs a non-empty word")
        except ValueError as exc:
            parser.error(str(exc))
        if suggestions:
            print(f"Did you mean: {', '.join(suggestions)}?")
        else:
            print(f"No suggestions for {args.spell!r}")

    if args.tree:
        trie.print_structure()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
