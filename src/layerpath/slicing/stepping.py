"""
Z-stepping shared by all layer-sweeping strategies.

Both sweep directions go through ``z_levels`` so that clamping and
off-by-one behavior are identical for additive and subtractive passes.
"""

import math
from enum import Enum
from typing import List

from layerpath.core.exceptions import ConfigurationError, DegenerateModelError
from layerpath.core.geometry import Z_TOLERANCE


class StepDirection(Enum):
    """Sweep direction of a layer generator."""

    ASCENDING = "ascending"  # Bottom-up (deposition)
    DESCENDING = "descending"  # Top-down (removal)


def _check_inputs(min_z: float, max_z: float, layer_height: float) -> None:
    if not math.isfinite(layer_height) or layer_height <= 0:
        raise ConfigurationError(
            "layer_height must be a positive number",
            details={"layer_height": layer_height},
        )
    if min_z > max_z:
        raise DegenerateModelError(
            "min_z is above max_z",
            details={"min_z": min_z, "max_z": max_z},
        )


def _full_steps(span: float, layer_height: float) -> int:
    if span <= Z_TOLERANCE:
        return 0
    return max(1, math.ceil((span - Z_TOLERANCE) / layer_height))


def layer_count(min_z: float, max_z: float, layer_height: float) -> int:
    """Number of planes ``z_levels`` returns for these inputs."""
    _check_inputs(min_z, max_z, layer_height)
    return _full_steps(max_z - min_z, layer_height) + 1


def z_levels(
    min_z: float,
    max_z: float,
    layer_height: float,
    direction: StepDirection = StepDirection.ASCENDING,
) -> List[float]:
    """
    Slicing heights between ``min_z`` and ``max_z`` inclusive.

    Steps from the starting bound by ``layer_height``. The last plane is
    clamped to the opposite bound, so when the span is not a multiple of
    the layer height the final layer is thinner. A span within
    ``Z_TOLERANCE`` yields a single plane at the starting bound.

    Examples:
        >>> z_levels(0.0, 10.0, 2.5)
        [0.0, 2.5, 5.0, 7.5, 10.0]
        >>> z_levels(0.0, 10.0, 3.0, StepDirection.DESCENDING)
        [10.0, 7.0, 4.0, 1.0, 0.0]

    Raises:
        ConfigurationError: If ``layer_height`` is not positive
        DegenerateModelError: If ``min_z > max_z``
    """
    _check_inputs(min_z, max_z, layer_height)
    steps = _full_steps(max_z - min_z, layer_height)

    if direction is StepDirection.ASCENDING:
        if steps == 0:
            return [min_z]
        return [min_z + i * layer_height for i in range(steps)] + [max_z]

    if steps == 0:
        return [max_z]
    return [max_z - i * layer_height for i in range(steps)] + [min_z]
