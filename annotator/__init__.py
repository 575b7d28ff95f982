from .board import MinesweeperBoard
from .errors import (
    AnnotatorError,
    ArgumentError,
    FileReadError,
    InvalidCharacter,
    InvalidShape,
    ParseError,
)
from .symbols import DEFAULT_SYMBOLS, Symbols, load_symbols

__all__ = [
    'MinesweeperBoard',
    'AnnotatorError',
    'ArgumentError',
    'FileReadError',
    'InvalidCharacter',
    'InvalidShape',
    'ParseError',
    'DEFAULT_SYMBOLS',
    'Symbols',
    'load_symbols',
]
