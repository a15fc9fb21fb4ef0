"""
Parametric configuration for the fitment tester.

Reads config.toml from the project root and merges profile overrides.
Usage:
    from config import load_config
    cfg = load_config()  # uses default profile
    cfg = load_config("compact")  # two sizes, three deltas
"""

import argparse
from dataclasses import asdict, dataclass
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # Python < 3.11 fallback

from config_validator import validate

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.toml"


@dataclass(frozen=True)
class FitmentConfig:
    """Immutable parameter set for one fitment test artifact."""

    hole_sizes: tuple[float, ...] = (6, 6.35, 7, 8, 9, 9.52, 10, 12, 12.7)
    hole_size_labels: tuple[str, ...] = (
        "6mm",
        '1/4"',
        "7mm",
        "8mm",
        "9mm",
        '3/8"',
        "10mm",
        "12mm",
        '1/2"',
    )
    size_deltas: tuple[float, ...] = (-0.2, 0.0, 0.1, 0.2, 0.4, 0.6)
    spacing: float = 18.0  # between hole centers
    plate_thickness: float = 10.0
    margin: float = 12.0
    text_height: float = 1.5  # nominal glyph height
    text_depth: float = 0.8  # extrusion of the label strokes
    text_line_width: float = 0.4
    cylinder_height: float = 20.0  # peg height
    text_color: tuple[float, float, float] = (1.0, 0.0, 0.0)

    @classmethod
    def from_dict(cls, values: dict) -> "FitmentConfig":
        """Build a config from TOML values, turning arrays into tuples."""
        return cls(
            **{
                key: tuple(value) if isinstance(value, list) else value
                for key, value in values.items()
            }
        )

    def as_dict(self) -> dict:
        return asdict(self)

    @property
    def rows(self) -> int:
        return len(self.hole_sizes)

    @property
    def columns(self) -> int:
        return len(self.size_deltas)

    @property
    def grid_width(self) -> float:
        return self.columns * self.spacing

    @property
    def grid_height(self) -> float:
        return self.rows * self.spacing


def load_config(profile: str | None = None) -> FitmentConfig:
    """Load configuration, optionally applying a named profile.

    Args:
        profile: Name of a profile from [profiles.<name>] in config.toml.
                 If None, checks sys.argv for --profile flag, then uses defaults.
    Returns:
        Validated FitmentConfig.
    Raises:
        ValueError: unknown profile name.
        ConfigValidationError: merged values are invalid.
    """
    if profile is None:
        profile = _parse_profile_from_argv()

    with open(CONFIG_PATH, "rb") as f:
        raw = tomllib.load(f)

    values = dict(raw["default"])

    if profile:
        profiles = raw.get("profiles", {})
        if profile not in profiles:
            available = ", ".join(profiles.keys()) or "(none)"
            raise ValueError(f"Unknown profile '{profile}'. Available: {available}")
        values.update(profiles[profile])

    validate(values)
    return FitmentConfig.from_dict(values)


def available_profiles() -> list[str]:
    """Names of the profiles defined in config.toml."""
    with open(CONFIG_PATH, "rb") as f:
        raw = tomllib.load(f)
    return list(raw.get("profiles", {}).keys())


def _parse_profile_from_argv() -> str | None:
    """Extract --profile from sys.argv without interfering with other parsers."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--profile", default=None)
    args, _ = parser.parse_known_args()
    return args.profile
