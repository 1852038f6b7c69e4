"""
Solid model boundary.

The slicing engine never builds or edits geometry itself. It talks to a
solid model through the small SolidModel protocol below: a z-extent query,
a planar section query, and a rigid z-translation that returns a new model.
"""

import math
from typing import Protocol, runtime_checkable

from layerpath.core.exceptions import DegenerateModelError
from layerpath.core.geometry import BoundaryCurve, ZBounds


@runtime_checkable
class SolidModel(Protocol):
    """
    Read-only volumetric model that can be cut by horizontal planes.

    Implementations must be safe to query from several threads at once and
    must never mutate themselves in any of these calls.
    """

    def bounds(self) -> ZBounds:
        """Return the model's vertical extent; ``min_z <= max_z``."""
        ...

    def slice_at(self, plane_z: float) -> list[BoundaryCurve]:
        """
        Cross-section at the horizontal plane ``z = plane_z``.

        Returns an empty list, never raises, when the plane misses the model.
        """
        ...

    def translate(self, dz: float) -> "SolidModel":
        """Return a new model shifted by ``dz`` along z."""
        ...


def validate_bounds(model: SolidModel) -> ZBounds:
    """
    Query and check a model's z-extent.

    Raises:
        DegenerateModelError: If the model is empty or its bounds are
            non-finite or inverted
    """
    if getattr(model, "is_empty", False):
        raise DegenerateModelError(
            "Model is empty",
            details={"model": type(model).__name__},
        )

    min_z, max_z = model.bounds()
    if not (math.isfinite(min_z) and math.isfinite(max_z)):
        raise DegenerateModelError(
            "Model bounds are not finite",
            details={"min_z": min_z, "max_z": max_z},
        )
    if min_z > max_z:
        raise DegenerateModelError(
            "Model bounds are inverted",
            details={"min_z": min_z, "max_z": max_z},
        )
    return ZBounds(float(min_z), float(max_z))
