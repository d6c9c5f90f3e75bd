"""Standard command-line arguments shared across tools."""

import argparse

from hexboggle.board import Board, RectBoard
from hexboggle.hex_board import HexBoard
from hexboggle.trie import Trie, make_trie

BOARD_TYPES = {
    "rect": RectBoard,
    "hex": HexBoard,
}


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--board_type",
        choices=tuple(BOARD_TYPES),
        default="rect",
        help="Rectangular grid (one row per line) or hexagonal rings (one ring per line, center first).",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )


def read_board(path: str) -> list[str]:
    """One row or ring per line. Only line endings are stripped: a space is a cell."""
    with open(path) as f:
        rows = [line.rstrip("\r\n") for line in f]
    return [row for row in rows if row]


def get_board_from_args(args: argparse.Namespace) -> Board:
    return BOARD_TYPES[args.board_type](read_board(args.board))


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    return make_trie(args.dictionary)
