"""
Command-line interface for LayerPath.

Thin wrapper around the slicing core: load a mesh or a strategy profile,
run a generator, and print a per-layer summary.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from layerpath import __version__
from layerpath.core.config import (
    AdditiveConfig,
    ConfigManager,
    SlicingConfig,
    SubtractiveConfig,
    build_config,
)
from layerpath.core.exceptions import LayerPathError
from layerpath.core.logging import configure_logging, get_logger
from layerpath.model.mesh_solid import MeshSolid
from layerpath.slicing.generator_factory import GENERATOR_REGISTRY, generate_toolpaths
from layerpath.slicing.toolpath import ToolpathSet

console = Console()
logger = get_logger(__name__)


def _summary_table(toolpath: ToolpathSet, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Layer", justify="right", style="cyan")
    table.add_column("Z (mm)", justify="right")
    table.add_column("Curves", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Length (mm)", justify="right")

    for seg in toolpath:
        table.add_row(
            str(seg.layer_index),
            f"{seg.z:.3f}",
            str(len(seg.curves)) if seg.curves else "[dim]0[/dim]",
            str(seg.point_count),
            f"{seg.get_length():.1f}",
        )
    return table


def _print_summary(toolpath: ToolpathSet, title: str) -> None:
    console.print(_summary_table(toolpath, title))
    console.print(
        f"[green]✓[/green] {len(toolpath)} layers, "
        f"{len(toolpath.empty_layers())} empty, "
        f"{toolpath.get_total_length():.1f} mm total"
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Minimum log level",
)
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines")
@click.pass_context
def main(ctx: click.Context, log_level: str, json_logs: bool) -> None:
    """LayerPath - layered toolpath generation for additive and subtractive passes."""
    configure_logging(level=log_level, json_output=json_logs)
    ctx.ensure_object(dict)


@main.command("strategies")
def list_strategies() -> None:
    """List registered slicing strategies."""
    table = Table(title="Available Strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Direction")
    table.add_column("Config")

    for name, generator_cls in GENERATOR_REGISTRY.items():
        table.add_row(name, generator_cls.direction.value, generator_cls.config_type.__name__)

    console.print(table)


@main.command("slice")
@click.argument("mesh_path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(sorted(GENERATOR_REGISTRY), case_sensitive=False),
    default="additive",
    help="Slicing strategy",
)
@click.option("--layer-height", "-l", type=float, default=None, help="Layer height / step down (mm)")
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Slicing threads (default 1, or the profile's max_workers)",
)
@click.option(
    "--profile",
    "-p",
    default=None,
    help="Strategy profile name (from <config-dir>/strategies)",
)
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    default="config",
    help="Configuration directory for --profile",
)
def slice_mesh(
    mesh_path: Path,
    strategy: str,
    layer_height: Optional[float],
    workers: Optional[int],
    profile: Optional[str],
    config_dir: Path,
) -> None:
    """Slice a mesh file and print a per-layer summary."""
    try:
        if profile:
            config: SlicingConfig = ConfigManager(config_dir).get_strategy(profile)
            if workers is not None:
                config = config.model_copy(update={"max_workers": workers})
        else:
            if layer_height is None:
                raise click.UsageError("--layer-height is required without --profile")
            config = build_config(
                strategy, {"layer_height": layer_height, "max_workers": workers or 1}
            )

        solid = MeshSolid.load(mesh_path)
        toolpath = generate_toolpaths(solid, config)
    except LayerPathError as e:
        console.print(f"[red]✗[/red] Slicing failed: {e}")
        raise SystemExit(1)

    logger.info("cli_slice_complete", mesh=str(mesh_path), layers=len(toolpath))
    _print_summary(toolpath, f"{toolpath.strategy.capitalize()}: {mesh_path.name}")


@main.command("demo")
def demo() -> None:
    """Slice a 10 mm cube additively (1.0 mm) and subtractively (2.0 mm)."""
    cube = MeshSolid.box(extents=(10.0, 10.0, 10.0), origin=(0.0, 0.0, 0.0))

    try:
        additive = generate_toolpaths(cube, AdditiveConfig(layer_height=1.0))
        subtractive = generate_toolpaths(cube, SubtractiveConfig(step_down=2.0))
    except LayerPathError as e:
        console.print(f"[red]✗[/red] Demo failed: {e}")
        raise SystemExit(1)

    _print_summary(additive, "Additive paths")
    _print_summary(subtractive, "Subtractive paths")


if __name__ == "__main__":
    main()
