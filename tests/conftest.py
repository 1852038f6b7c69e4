"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from layerpath.model.mesh_solid import MeshSolid
from layerpath.model.prism_solid import PrismSolid, SolidAssembly


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a sample configuration directory with strategy profiles."""
    config_dir = temp_dir / "config"
    (config_dir / "strategies").mkdir(parents=True)

    additive_profile = """
strategy:
  name: "Fine deposition"
  type: additive
  description: "0.25 mm layers"

slicing:
  layer_height: 0.25
  max_workers: 2
"""
    (config_dir / "strategies" / "fine_additive.yaml").write_text(additive_profile)

    subtractive_profile = """
strategy:
  name: "Roughing 2mm"
  type: subtractive

slicing:
  step_down: 2.0
"""
    (config_dir / "strategies" / "roughing_2mm.yaml").write_text(subtractive_profile)

    return config_dir


@pytest.fixture
def block():
    """20 x 10 mm rectangular prism spanning z = 0..10."""
    return PrismSolid.rectangle(width=20.0, depth=10.0, z_min=0.0, z_max=10.0)


@pytest.fixture
def gapped_assembly():
    """Two blocks (z = 0..3 and z = 7..10) with nothing in between."""
    return SolidAssembly(
        [
            PrismSolid.rectangle(10.0, 10.0, z_min=0.0, z_max=3.0),
            PrismSolid.rectangle(10.0, 10.0, z_min=7.0, z_max=10.0),
        ]
    )


@pytest.fixture
def cube_mesh():
    """10 mm trimesh cube with its minimum corner at the origin."""
    return MeshSolid.box(extents=(10.0, 10.0, 10.0), origin=(0.0, 0.0, 0.0))
