"""Load, validate, and hot-reload the cycle prediction configuration.

The config lives in ``prediction_config.yaml`` alongside this module.  The
path can be overridden with the ``CYCLECAST_PREDICTION_CONFIG_PATH``
environment variable.  At first use it is loaded once and cached.  Call
``reload_prediction_config()`` to re-read from disk.

Usage::

    from cyclecast.prediction.config_loader import get_prediction_config

    config = get_prediction_config()
    config.default_cycle_length          # 28
    config.recency_weight(2)             # 0.6
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cyclecast.config import get_settings

logger = logging.getLogger("cyclecast.prediction.config")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "prediction_config.yaml"


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass
class ProjectionConfig:
    """Settings for projecting future periods onto a calendar."""

    cycles: int = 3
    period_days: int = 5


@dataclass
class PredictionConfig:
    """Complete, validated prediction configuration.

    Attributes:
        version:              Config schema version string.
        default_cycle_length: Cycle length assumed when there is no history.
        episode_gap_days:     Largest gap (days) between logged dates that
                              still belong to the same period episode.
        max_weighted_gaps:    How many recent cycle gaps feed the average.
        weight_decay:         Weight lost per step back from the newest gap.
        min_weight:           Floor for a gap's weight.
        luteal_phase_days:    Days from ovulation to the next period.
        fertile_lead_days:    Days before ovulation the fertile window opens.
        projection:           Calendar projection settings.
    """

    version: str = "1.0"
    default_cycle_length: int = 28
    episode_gap_days: int = 7
    max_weighted_gaps: int = 5
    weight_decay: float = 0.2
    min_weight: float = 0.2
    luteal_phase_days: int = 14
    fertile_lead_days: int = 5
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    _raw: dict = field(default_factory=dict, repr=False)

    def recency_weight(self, index: int) -> float:
        """Return the weight for the gap ``index`` steps back from the newest.

        Args:
            index: 0 for the most recent gap.

        Returns:
            ``max(1 - index * weight_decay, min_weight)``.
        """
        return max(1 - index * self.weight_decay, self.min_weight)


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when prediction_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Prediction config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            return yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc


def _validate_and_build(raw: dict) -> PredictionConfig:
    """Validate the raw YAML dict and construct a PredictionConfig.

    Missing keys fall back to the dataclass defaults.  Every invalid value is
    collected before raising, so one run reports all problems.

    Args:
        raw: Parsed YAML dict.

    Returns:
        Validated PredictionConfig instance.

    Raises:
        ConfigValidationError: If any value has the wrong type or range.
    """
    errors: list[str] = []
    defaults = PredictionConfig()

    def _int(d: dict, key: str, section: str, default: int, minimum: int) -> int:
        val = d.get(key, default)
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(f"{section}.{key} must be an integer, got {val!r}")
            return default
        if val < minimum:
            errors.append(f"{section}.{key} = {val} must be >= {minimum}")
        return val

    def _fraction(d: dict, key: str, section: str, default: float) -> float:
        val = d.get(key, default)
        try:
            f = float(val)
        except (TypeError, ValueError):
            errors.append(f"{section}.{key} must be a number, got {val!r}")
            return default
        if not (0.0 <= f <= 1.0):
            errors.append(f"{section}.{key} = {f} is out of range [0.0, 1.0]")
        return f

    version = str(raw.get("version", defaults.version))

    # ── Cycle length estimation ──
    cl_raw: dict[str, Any] = raw.get("cycle_length") or {}
    if not isinstance(cl_raw, dict):
        errors.append("'cycle_length' must be a mapping")
        cl_raw = {}
    default_cycle_length = _int(
        cl_raw, "default_days", "cycle_length", defaults.default_cycle_length, 1
    )
    episode_gap_days = _int(
        cl_raw, "episode_gap_days", "cycle_length", defaults.episode_gap_days, 0
    )
    max_weighted_gaps = _int(
        cl_raw, "max_weighted_gaps", "cycle_length", defaults.max_weighted_gaps, 1
    )
    weight_decay = _fraction(cl_raw, "weight_decay", "cycle_length", defaults.weight_decay)
    min_weight = _fraction(cl_raw, "min_weight", "cycle_length", defaults.min_weight)
    if min_weight == 0.0:
        errors.append("cycle_length.min_weight must be greater than 0.0")

    # ── Ovulation / fertile window ──
    ov_raw: dict[str, Any] = raw.get("ovulation") or {}
    if not isinstance(ov_raw, dict):
        errors.append("'ovulation' must be a mapping")
        ov_raw = {}
    luteal_phase_days = _int(
        ov_raw, "luteal_phase_days", "ovulation", defaults.luteal_phase_days, 0
    )
    fertile_lead_days = _int(
        ov_raw, "fertile_lead_days", "ovulation", defaults.fertile_lead_days, 0
    )

    # ── Calendar projection ──
    pr_raw: dict[str, Any] = raw.get("projection") or {}
    if not isinstance(pr_raw, dict):
        errors.append("'projection' must be a mapping")
        pr_raw = {}
    projection = ProjectionConfig(
        cycles=_int(pr_raw, "cycles", "projection", defaults.projection.cycles, 0),
        period_days=_int(
            pr_raw, "period_days", "projection", defaults.projection.period_days, 1
        ),
    )

    if errors:
        raise ConfigValidationError(
            f"prediction_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return PredictionConfig(
        version=version,
        default_cycle_length=default_cycle_length,
        episode_gap_days=episode_gap_days,
        max_weighted_gaps=max_weighted_gaps,
        weight_decay=weight_decay,
        min_weight=min_weight,
        luteal_phase_days=luteal_phase_days,
        fertile_lead_days=fertile_lead_days,
        projection=projection,
        _raw=raw,
    )


def load_prediction_config(path: Path | None = None) -> PredictionConfig:
    """Load and validate the prediction config from disk.

    Args:
        path: Override path to YAML.  Falls back to the path in settings, then
              to the bundled prediction_config.yaml.

    Returns:
        Validated PredictionConfig instance.
    """
    target = path or get_settings().prediction_config_path or _CONFIG_PATH
    raw = _load_yaml(Path(target))
    config = _validate_and_build(raw)
    logger.info("Loaded prediction config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: PredictionConfig | None = None
_config_lock = threading.Lock()


def get_prediction_config() -> PredictionConfig:
    """Return the global PredictionConfig singleton, loading it on first call.

    Thread-safe.  Use ``reload_prediction_config()`` to refresh after YAML changes.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_prediction_config()
    return _config


def reload_prediction_config(path: Path | None = None) -> PredictionConfig:
    """Reload the prediction config from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.

    Args:
        path: Override path to YAML.

    Returns:
        The newly loaded PredictionConfig.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_prediction_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info(
        "Reloaded prediction config: %s → %s",
        old_version,
        new_config.version,
    )
    return new_config
