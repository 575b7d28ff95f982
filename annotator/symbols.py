# annotator/symbols.py

import os
from dataclasses import dataclass
from typing import Tuple

import yaml

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")

RESERVED = {"\n", "\r"}


@dataclass(frozen=True)
class Symbols:
    """Glyphs used to read and print a board."""
    mine: str
    empty: Tuple[str, ...]
    empty_display: str

    def __post_init__(self):
        if isinstance(self.empty, str):
            object.__setattr__(self, "empty", (self.empty,))
        else:
            object.__setattr__(self, "empty", tuple(self.empty))
        glyphs = [self.mine, *self.empty, self.empty_display]
        for glyph in glyphs:
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"symbol must be a single character, got {glyph!r}")
            if glyph in RESERVED or glyph.isdigit():
                raise ValueError(f"symbol {glyph!r} is reserved")
        if not self.empty:
            raise ValueError("at least one empty-cell symbol is required")
        if self.mine in self.empty or self.mine == self.empty_display:
            raise ValueError(f"mine symbol {self.mine!r} clashes with an empty-cell symbol")

    def is_cell(self, char: str) -> bool:
        return char == self.mine or char in self.empty


DEFAULT_SYMBOLS = Symbols(mine="*", empty=("·", "."), empty_display="·")


def load_config(config_path: str = CONFIG_PATH) -> dict:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def available_symbol_sets(config_path: str = CONFIG_PATH) -> list[str]:
    return list(load_config(config_path).keys())


def load_symbols(config_name: str = "default", config_path: str = CONFIG_PATH) -> Symbols:
    """
    Build a Symbols from the named section of a YAML config file.

    Raises KeyError for an unknown section and ValueError for a section
    that is missing keys or holds unusable glyphs.
    """
    all_configs = load_config(config_path)
    cfg = all_configs[config_name]
    if not isinstance(cfg, dict):
        raise ValueError(f"symbol set {config_name!r} must be a mapping")

    try:
        mine = cfg["mine"]
        empty = cfg["empty"]
        empty_display = cfg.get("empty_display")
    except KeyError as e:
        raise ValueError(f"symbol set {config_name!r} is missing {e.args[0]!r}") from e

    if isinstance(empty, str):
        empty = [empty]
    empty = tuple(empty)
    if empty_display is None and empty:
        empty_display = empty[0]

    return Symbols(mine=mine, empty=empty, empty_display=empty_display)
