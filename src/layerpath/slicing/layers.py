"""
Per-layer slicing at the canonical plane.

Solid-model section queries are only relied upon at z = 0. To cut a model at
height ``z``, the model is shifted down by ``z``, cut at z = 0, and the
resulting planar curves are lifted back to ``z``. Each call depends only on
``(model, z)``, so layers can be computed in any order or in parallel.
"""

import logging

from layerpath.core.exceptions import LayerPathError, SlicingError
from layerpath.core.geometry import BoundaryCurve
from layerpath.model.solid import SolidModel
from layerpath.slicing.toolpath import ToolpathSegment

logger = logging.getLogger(__name__)

CANONICAL_PLANE_Z = 0.0


def canonical_section(model: SolidModel, z: float) -> list[BoundaryCurve]:
    """
    Cross-section of ``model`` at height ``z`` via the canonical plane.

    Raises:
        SlicingError: If the model's section query fails
    """
    try:
        return model.translate(CANONICAL_PLANE_Z - z).slice_at(CANONICAL_PLANE_Z)
    except LayerPathError:
        raise
    except Exception as e:
        raise SlicingError(
            f"Section query failed at z={z}",
            z=z,
            details={"error": str(e), "model": type(model).__name__},
        ) from e


def slice_layer(
    model: SolidModel,
    z: float,
    layer_index: int,
    metadata: dict | None = None,
) -> ToolpathSegment:
    """
    Build the ToolpathSegment for one plane.

    A plane that misses the model yields a segment with no curves.
    """
    curves = canonical_section(model, z)
    logger.debug("Layer %d at z=%.4f: %d curves", layer_index, z, len(curves))
    return ToolpathSegment.from_boundary_curves(z, layer_index, curves, metadata)


def slice_direct(model: SolidModel, z: float, layer_index: int = 0) -> ToolpathSegment:
    """Build a segment by cutting the model in place at ``z``, without the shift."""
    return ToolpathSegment.from_boundary_curves(z, layer_index, model.slice_at(z))
