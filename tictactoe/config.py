# tictactoe/config.py
from dataclasses import dataclass, field
import os
import tomllib


@dataclass
class SearchConfig:
    board_size: int = 3
    first_player: str = "X"
    alpha_beta: bool = True
    verbose: bool = False  # print an info line after every search
    max_size: int = 3  # largest board the API accepts
    max_empty_cells: int = 9  # /search refuses positions with more empty cells than this


@dataclass
class UIConfig:
    engine_name: str = "Impure Python with Alpha Beta Pruning"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "ui"):
            for k, v in raw.get(section, {}).items():
                if hasattr(getattr(cfg, section), k):
                    setattr(getattr(cfg, section), k, v)
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TTT_CONFIG_TOML", "config.toml"))
# allow env override of the default board size for quick debugging
override_size = os.environ.get("TTT_BOARD_SIZE")
if override_size:
    CONFIG.search.board_size = int(override_size)
