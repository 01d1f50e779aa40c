"""
Configuration management for edgecurve.

Loads YAML configuration with defaults for every pipeline stage.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml

from edgecurve.fitting.polynomial import MAX_DEGREE
from edgecurve.models import ScanMode


@dataclass
class EdgeConfig:
    """Configuration for gradient edge extraction."""
    threshold: float = 30.0


@dataclass
class SegmentConfig:
    """Configuration for greedy path segmentation."""
    max_gap: float = 15.0
    min_path_length: int = 20  # paths must be strictly longer
    max_paths: int = 5


@dataclass
class SimplifyConfig:
    """Configuration for Douglas-Peucker simplification."""
    epsilon: float = 10.0


@dataclass
class FitConfig:
    """Configuration for polynomial fitting."""
    degree: int = 5
    sample_step: int = 5


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    edges: EdgeConfig = field(default_factory=EdgeConfig)
    segment: SegmentConfig = field(default_factory=SegmentConfig)
    simplify: SimplifyConfig = field(default_factory=SimplifyConfig)
    fit: FitConfig = field(default_factory=FitConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)
    mode: ScanMode = ScanMode.NATURAL


# (max_gap, epsilon) per scan mode
MODE_PRESETS = {
    ScanMode.NATURAL: (15.0, 10.0),
    ScanMode.ARCHITECTURAL: (5.0, 2.0),
}

_SECTIONS = ("edges", "segment", "simplify", "fit", "tracing")


def apply_mode(config, mode):
    """
    Switch config to a scan mode, overwriting max_gap and epsilon with the
    mode's presets. Returns the same config object.
    """
    mode = ScanMode(mode)
    max_gap, epsilon = MODE_PRESETS[mode]
    config.mode = mode
    config.segment.max_gap = max_gap
    config.simplify.epsilon = epsilon
    return config


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values. A "mode" key applies the
    mode presets first; explicit section values override them.

    Raises FileNotFoundError if config_path is given but does not exist.
    """
    config = PipelineConfig()

    if config_path:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass."""
    if "mode" in yaml_data:
        apply_mode(config, yaml_data["mode"])

    for section in _SECTIONS:
        if section not in yaml_data:
            continue
        target = getattr(config, section)
        for key, value in (yaml_data[section] or {}).items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def validate_config(config):
    """
    Check parameter ranges.

    Returns a list of error messages (empty if valid).
    """
    errors = []

    if config.edges.threshold <= 0:
        errors.append(f"edges.threshold must be > 0, got {config.edges.threshold}")
    if config.segment.max_gap <= 0:
        errors.append(f"segment.max_gap must be > 0, got {config.segment.max_gap}")
    if config.segment.min_path_length < 0:
        errors.append(f"segment.min_path_length must be >= 0, got {config.segment.min_path_length}")
    if config.segment.max_paths < 1:
        errors.append(f"segment.max_paths must be >= 1, got {config.segment.max_paths}")
    if config.simplify.epsilon < 0:
        errors.append(f"simplify.epsilon must be >= 0, got {config.simplify.epsilon}")
    if not isinstance(config.fit.degree, int) or not 0 <= config.fit.degree <= MAX_DEGREE:
        errors.append(f"fit.degree must be an integer in [0, {MAX_DEGREE}], got {config.fit.degree}")
    if config.fit.sample_step < 1:
        errors.append(f"fit.sample_step must be >= 1, got {config.fit.sample_step}")

    return errors


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = PipelineConfig()

    yaml_data = {"mode": config.mode.value}
    for section in _SECTIONS:
        yaml_data[section] = asdict(getattr(config, section))

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
