"""Configuration settings for heads-up hold'em rounds."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from poker.hand_evaluator import MAX_CARDS, MIN_CARDS


@dataclass
class GameConfig:
    """Game configuration."""

    seed: int | None = None
    hole_cards: int = 2
    community_cards: int = 5

    def __post_init__(self) -> None:
        if self.hole_cards < 1 or self.community_cards < 1:
            raise ValueError("hole_cards and community_cards must be positive")
        total = self.hole_cards + self.community_cards
        if not MIN_CARDS <= total <= MAX_CARDS:
            raise ValueError(
                f"hole_cards + community_cards must be {MIN_CARDS}-{MAX_CARDS}, got {total}"
            )


@dataclass
class DisplayConfig:
    """Terminal display configuration."""

    show_points: bool = True
    clear_screen: bool = False


@dataclass
class LoggingConfig:
    """Round log configuration."""

    file: str | None = None  # Log file path, disabled when None
    level: str = "INFO"


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "game" in data:
        config.game = GameConfig(**data["game"])
    if "display" in data:
        config.display = DisplayConfig(**data["display"])
    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": {
            "seed": config.game.seed,
            "hole_cards": config.game.hole_cards,
            "community_cards": config.game.community_cards,
        },
        "display": {
            "show_points": config.display.show_points,
            "clear_screen": config.display.clear_screen,
        },
        "logging": {
            "file": config.logging.file,
            "level": config.logging.level,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
