"""
Configuration management for prdlint.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, and validation.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from pathlib import Path
from enum import Enum
import os
import yaml

from ..report.scoring import ScoringWeights
from ..rules.clarity import DEFAULT_ESCALATION_THRESHOLD
from ..rules.models import Category, RuleConfigurationError


class OutputFormat(Enum):
    """Report output formats."""
    TEXT = "text"
    JSON = "json"


@dataclass
class ScoringConfig:
    """Points deducted from 100 per issue of each severity."""
    error: int = 15
    warning: int = 7
    info: int = 2
    suggestion: int = 0
    min_score: int = field(default_factory=lambda: int(os.getenv("PRDLINT_MIN_SCORE", "0")))

    def to_weights(self) -> ScoringWeights:
        return ScoringWeights(
            error=self.error,
            warning=self.warning,
            info=self.info,
            suggestion=self.suggestion,
        )


@dataclass
class RulesConfig:
    """Configuration for rule selection."""
    categories: List[str] = field(default_factory=list)  # Empty means all
    exclude_categories: List[str] = field(default_factory=list)
    disabled_rules: List[str] = field(default_factory=list)
    escalation_threshold: int = DEFAULT_ESCALATION_THRESHOLD
    max_workers: Optional[int] = None  # Thread pool size; None runs rules sequentially

    def __post_init__(self):
        # Fail early on typos; RuleSet.filter checks rule ids
        for name in [*self.categories, *self.exclude_categories]:
            Category.from_string(name)
        if self.escalation_threshold < 1:
            raise RuleConfigurationError(
                f"escalation_threshold must be >= 1, got {self.escalation_threshold}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise RuleConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: OutputFormat = OutputFormat.TEXT
    indent: int = 2
    color: bool = True
    ensure_ascii: bool = False

    def __post_init__(self):
        if isinstance(self.format, str):
            self.format = OutputFormat(self.format)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("PRDLINT_LOG_LEVEL", "WARNING"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance

        Raises:
            ValueError: Unknown keys or invalid values (RuleConfigurationError
                for rule and scoring settings)
        """
        try:
            scoring = ScoringConfig(**data.get('scoring', {}))
            rules = RulesConfig(**data.get('rules', {}))
            output = OutputConfig(**data.get('output', {}))
            logging = LoggingConfig(**data.get('logging', {}))
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        # Surface bad weights at load time rather than at first lint
        scoring.to_weights()

        return cls(
            scoring=scoring,
            rules=rules,
            output=output,
            logging=logging,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            'scoring': {
                'error': self.scoring.error,
                'warning': self.scoring.warning,
                'info': self.scoring.info,
                'suggestion': self.scoring.suggestion,
                'min_score': self.scoring.min_score,
            },
            'rules': {
                'categories': list(self.rules.categories),
                'exclude_categories': list(self.rules.exclude_categories),
                'disabled_rules': list(self.rules.disabled_rules),
                'escalation_threshold': self.rules.escalation_threshold,
                'max_workers': self.rules.max_workers,
            },
            'output': {
                'format': self.output.format.value,
                'indent': self.output.indent,
                'color': self.output.color,
                'ensure_ascii': self.output.ensure_ascii,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """
    Get the default application configuration.

    Returns:
        AppConfig with all default values
    """
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. ./prdlint.yaml
    3. ./config/prdlint.yaml
    4. ~/.prdlint/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("prdlint.yaml"),
        Path("config/prdlint.yaml"),
        Path.home() / ".prdlint" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
