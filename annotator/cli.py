# annotator/cli.py
"""Command-line entry point.

Usage:
  minesweeper-annotate path/to/board.txt

Reads the board, annotates every empty cell with its number of
neighbouring mines and prints the result. Every diagnostic goes to
stdout as a single line and nothing of the board is printed on failure.
"""
import argparse
import sys

from .board import MinesweeperBoard
from .errors import ArgumentError, FileReadError, ParseError
from .utils import read_board_file


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="minesweeper-annotate",
        description="Annotate a Minesweeper board with mine counts.",
        add_help=False,
    )
    p.add_argument("path", help="path to the board file")
    return p


def parse_args(argv) -> argparse.Namespace:
    if len(argv) != 1:
        raise ArgumentError(f"expected exactly one argument (the board file), got {len(argv)}")
    # "--" keeps a path such as "-h" from being read as an option.
    return build_parser().parse_args(["--", *argv])


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
        text = read_board_file(args.path)
    except (ArgumentError, FileReadError) as e:
        print(f"Could not open file: {e}")
        return 1

    try:
        board = MinesweeperBoard.from_text(text)
    except ParseError as e:
        print(f"Failed to parse file into board: {e}")
        return 1

    print(board.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
