import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ErrorContext, ManifestError
from .ir.configuration import InputLevel

MANIFEST_FILE = "blink.toml"

# Environment variable that overrides [logging].level
LOG_LEVEL_ENV_VAR = "BLINK_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# =============================================================================
# Planner Configuration
# =============================================================================


@dataclass
class PlannerConfig:
    """Defaults for input resolution."""

    default_level: InputLevel = InputLevel.MODERATE
    default_industry: str = "healthcare"  # Catalog fallback for unknown industries
    tagline_seed: int | None = None  # None = hash-based tagline selection


# =============================================================================
# Variant Configuration
# =============================================================================


@dataclass
class VariantsConfig:
    """Default preset x theme matrix for `blink variants`."""

    presets: list[str] = field(default_factory=lambda: ["luxury", "friendly"])
    themes: list[str] = field(default_factory=lambda: ["light", "dark"])


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class BlinkManifest:
    """Project configuration read from blink.toml.

    Example blink.toml:

        [planner]
        default_level = "extreme"
        default_industry = "healthcare"
        tagline_seed = 7

        [variants]
        presets = ["luxury", "friendly", "modern-minimal"]
        themes = ["light", "dark"]

        [logging]
        level = "INFO"
    """

    planner: PlannerConfig = field(default_factory=PlannerConfig)
    variants: VariantsConfig = field(default_factory=VariantsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_level(self) -> str:
        """Effective log level, honouring BLINK_LOG_LEVEL."""
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
        if env_level in _LOG_LEVELS:
            return env_level
        return self.logging.level


def load_manifest(path: Path) -> BlinkManifest:
    context = ErrorContext(file=path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", context) from e

    planner_data = data.get("planner", {})
    variants_data = data.get("variants", {})
    logging_data = data.get("logging", {})

    level_value = planner_data.get("default_level", InputLevel.MODERATE.value)
    try:
        default_level = InputLevel(level_value)
    except ValueError as e:
        valid = ", ".join(level.value for level in InputLevel)
        raise ManifestError(
            f"Unknown input level '{level_value}' (expected one of: {valid})",
            ErrorContext(file=path, field="planner.default_level"),
        ) from e

    tagline_seed = planner_data.get("tagline_seed")
    if tagline_seed is not None and (
        not isinstance(tagline_seed, int) or isinstance(tagline_seed, bool)
    ):
        raise ManifestError(
            f"tagline_seed must be an integer, got {tagline_seed!r}",
            ErrorContext(file=path, field="planner.tagline_seed"),
        )

    planner = PlannerConfig(
        default_level=default_level,
        default_industry=planner_data.get("default_industry", "healthcare"),
        tagline_seed=tagline_seed,
    )

    variants = VariantsConfig(
        presets=list(variants_data.get("presets", ["luxury", "friendly"])),
        themes=list(variants_data.get("themes", ["light", "dark"])),
    )

    log_level = str(logging_data.get("level", "WARNING")).upper()
    if log_level not in _LOG_LEVELS:
        raise ManifestError(
            f"Unknown log level '{log_level}'",
            ErrorContext(file=path, field="logging.level"),
        )

    return BlinkManifest(
        planner=planner,
        variants=variants,
        logging=LoggingConfig(level=log_level),
    )


def load_project_manifest(project_root: Path) -> BlinkManifest:
    """Load blink.toml from ``project_root``, or defaults when absent."""
    path = project_root / MANIFEST_FILE
    if not path.exists():
        return BlinkManifest()
    return load_manifest(path)
