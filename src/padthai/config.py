"""Configuration management for Pad Thai checkers."""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from .rules import MAX_SEARCH_DEPTH

logger = logging.getLogger(__name__)


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'padthai'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class SearchSettings:
    """Search settings."""
    difficulty: str = "medium"  # easy, medium, hard, custom
    depth: int = 4  # used when difficulty is "custom"
    max_depth: int = MAX_SEARCH_DEPTH
    shuffle: bool = True  # randomize tie-breaking between equal moves
    seed: Optional[int] = None


@dataclass
class EvaluationSettings:
    """Evaluation weights."""
    weight_man: float = 1.0
    weight_king: float = 5.0
    weight_advancement: float = 0.1

    def to_weights(self) -> Dict[str, float]:
        """Weights in the form ``evaluate_board`` expects."""
        return {
            'man': self.weight_man,
            'king': self.weight_king,
            'advancement': self.weight_advancement,
        }


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    search: SearchSettings = field(default_factory=SearchSettings)
    evaluation: EvaluationSettings = field(default_factory=EvaluationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'search': asdict(self.search),
            'evaluation': asdict(self.evaluation),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'search' in data:
            config.search = SearchSettings(**data['search'])
        if 'evaluation' in data:
            config.evaluation = EvaluationSettings(**data['evaluation'])
        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
                if data is None:
                    return cls()
                return cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the global configuration (None forces a reload on next access)."""
    global _config
    _config = config


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config
