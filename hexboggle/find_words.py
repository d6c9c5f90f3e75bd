#!/usr/bin/env python
"""Find all the words on a rectangular or hexagonal board and print them."""

import argparse
import sys
import time

from tqdm import tqdm

from hexboggle.args import add_standard_args, get_board_from_args, get_trie_from_args
from hexboggle.boggler import Boggler


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find all the words on a board")
    add_standard_args(parser)
    parser.add_argument(
        "board", metavar="FILE", help="File containing the board, one row or ring per line."
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar over starting cells.",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Only print the number of words found.",
    )
    args = parser.parse_args(argv)

    board = get_board_from_args(args)
    t = get_trie_from_args(args)
    boggler = Boggler(t)

    start_s = time.time()
    cells = board.all_cells()
    words = set()
    for cell in tqdm(cells, smoothing=0, disable=not args.progress):
        words |= boggler.words_from(board, cell)
    elapsed_s = time.time() - start_s

    if args.count:
        print(len(words))
    else:
        for word in sorted(words):
            print(word)
    sys.stderr.write(
        f"{len(words)} words on {len(cells)} cells in {elapsed_s:.2f}s\n"
    )


if __name__ == "__main__":
    main()
