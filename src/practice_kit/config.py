"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from practice_kit.problems import MIN_RATING, SQUARE_DELAY


@dataclass
class ProblemsConfig:
    """Inputs used when running the problems as a demo."""
    min_rating: float = float(MIN_RATING)
    square_delay: float = SQUARE_DELAY


@dataclass
class OutputConfig:
    """Output settings."""
    reports_dir: Path = Path("reports")


@dataclass
class Settings:
    """Application settings."""

    problems: ProblemsConfig = field(default_factory=ProblemsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def min_rating(self) -> float:
        return self.problems.min_rating

    @property
    def square_delay(self) -> float:
        return self.problems.square_delay

    @property
    def reports_dir(self) -> Path:
        return self.output.reports_dir


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _apply_section(section: object, values: dict, name: str) -> None:
    """Copy YAML values onto a config dataclass, rejecting unknown keys."""
    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"Unknown setting '{name}.{key}'")
        setattr(section, key, value)


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings()

    if "problems" in config:
        _apply_section(settings.problems, config["problems"] or {}, "problems")
        settings.problems.min_rating = float(settings.problems.min_rating)
        settings.problems.square_delay = float(settings.problems.square_delay)

    if "output" in config:
        _apply_section(settings.output, config["output"] or {}, "output")
        settings.output.reports_dir = Path(settings.output.reports_dir)

    # Environment overrides YAML
    square_delay = os.getenv("PRACTICE_KIT_SQUARE_DELAY")
    if square_delay:
        settings.problems.square_delay = float(square_delay)

    reports_dir = os.getenv("PRACTICE_KIT_REPORTS_DIR")
    if reports_dir:
        settings.output.reports_dir = Path(reports_dir)

    return settings
