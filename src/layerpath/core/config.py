"""
Configuration management for LayerPath.

Each slicing strategy owns its own configuration model. Configurations are
plain pydantic models and can be built in code or loaded from YAML strategy
profiles.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from layerpath.core.exceptions import ConfigurationError


class SlicingConfig(BaseModel):
    """
    Settings shared by every layer-sweeping strategy.

    ``layer_height`` is not range-constrained here: a non-positive value is
    reported as a ConfigurationError by the generator, before any slicing.

    Attributes:
        layer_height: Vertical distance between consecutive planes (mm)
        min_z: Optional lower bound clipping the model's z range
        max_z: Optional upper bound clipping the model's z range
        max_workers: Number of threads used to slice layers (1 = sequential)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    layer_height: float
    min_z: Optional[float] = None
    max_z: Optional[float] = None
    max_workers: int = Field(default=1, ge=1)


class AdditiveConfig(SlicingConfig):
    """Configuration for bottom-up layer deposition."""

    pass


class SubtractiveConfig(SlicingConfig):
    """
    Configuration for top-down z-level material removal.

    Accepts ``step_down`` as an alternative name for ``layer_height``.
    """

    layer_height: float = Field(
        validation_alias=AliasChoices("layer_height", "step_down"),
    )


STRATEGY_CONFIGS: dict[str, type[SlicingConfig]] = {
    "additive": AdditiveConfig,
    "subtractive": SubtractiveConfig,
}


def build_config(strategy: str, values: dict[str, Any]) -> SlicingConfig:
    """
    Build the configuration model for a strategy from raw values.

    Args:
        strategy: Strategy type ('additive' or 'subtractive')
        values: Raw configuration values (e.g. a YAML ``slicing`` section)

    Returns:
        Validated configuration instance

    Raises:
        ConfigurationError: If the strategy is unknown or values are invalid
    """
    key = strategy.strip().lower()
    if key not in STRATEGY_CONFIGS:
        raise ConfigurationError(
            f"Unknown strategy type: {strategy}",
            details={"available": sorted(STRATEGY_CONFIGS)},
        )
    try:
        return STRATEGY_CONFIGS[key](**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {key} configuration",
            details={"error": str(e)},
        ) from e


class StrategyProfile(BaseModel):
    """A named strategy configuration, as stored in a YAML profile."""

    name: str
    type: str
    description: str = ""
    slicing: dict[str, Any] = Field(default_factory=dict)

    def build_config(self) -> SlicingConfig:
        """Build the strategy-specific configuration for this profile."""
        return build_config(self.type, self.slicing)


def load_profile(path: str | Path) -> StrategyProfile:
    """
    Load a single strategy profile from a YAML file.

    Expected layout::

        strategy:
          name: "Roughing 2mm"
          type: subtractive
        slicing:
          step_down: 2.0

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Profile not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse profile: {path}",
            details={"error": str(e)},
        ) from e

    if not data or "strategy" not in data:
        raise ConfigurationError(
            f"Profile has no 'strategy' section: {path}",
        )

    profile_data = dict(data["strategy"])
    if "slicing" in data:
        profile_data["slicing"] = data["slicing"] or {}

    try:
        return StrategyProfile(**profile_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid profile: {path}",
            details={"error": str(e)},
        ) from e


def load_config(path: str | Path) -> SlicingConfig:
    """Load a YAML profile and return its strategy configuration."""
    return load_profile(path).build_config()


@dataclass
class ConfigManager:
    """
    Central registry of strategy profiles.

    Loads every ``strategies/*.yaml`` file below ``config_dir``.

    Example:
        >>> config = ConfigManager(config_dir=Path("config"))
        >>> roughing = config.get_strategy("roughing_2mm")
    """

    config_dir: Path
    _profiles: dict[str, StrategyProfile] = field(default_factory=dict, init=False)
    _loaded: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.config_dir = Path(self.config_dir)
        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}"
            )

    def load(self) -> None:
        """Load all strategy profiles from disk."""
        strategies_dir = self.config_dir / "strategies"
        if strategies_dir.exists():
            for config_file in sorted(strategies_dir.glob("*.yaml")):
                self._profiles[config_file.stem] = load_profile(config_file)
        self._loaded = True

    def get_profile(self, name: str) -> StrategyProfile:
        """
        Get a strategy profile by name.

        Args:
            name: Profile name (without .yaml extension)

        Raises:
            ConfigurationError: If the profile is not found
        """
        if not self._loaded:
            self.load()

        if name not in self._profiles:
            raise ConfigurationError(
                f"Strategy profile not found: {name}",
                details={"available": list(self._profiles.keys())},
            )
        return self._profiles[name]

    def get_strategy(self, name: str) -> SlicingConfig:
        """Get the validated strategy configuration for a profile."""
        return self.get_profile(name).build_config()

    def list_strategies(self) -> list[str]:
        """List available strategy profiles."""
        if not self._loaded:
            self.load()
        return list(self._profiles.keys())
