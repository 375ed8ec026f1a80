"""Command Line Interface for Floor Planner.

This module provides a simple CLI for inspecting floor plan documents,
hit-testing points, placing furniture and listing elevations.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .core.catalog import FurnitureType, catalog_entry_for
from .core.model import FloorPlan, MeasurementUnit
from .core.topology import room_area
from .engine.editor import EditorSession
from .geom.collision import colliding_pairs
from .geom.elevation import ElevationDirection, elevation_extent, visible_walls
from .geom.hit_test import WallHit, find_entity_at
from .geom.primitives import Point
from .io.document import DocumentError, load_plan, save_plan

app = typer.Typer(
    name="floor-planner",
    help="A CLI tool for floor plan editing and inspection",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(plan_path: Path) -> FloorPlan:
    try:
        plan = load_plan(plan_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except DocumentError as e:
        console.print(f"[red]Error: Invalid floor plan - {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Loaded plan '{plan.name}' from {plan_path}[/green]")
    return plan


def _fmt(point: Point) -> str:
    return f"({point.x:.1f}, {point.y:.1f})"


@app.command()
def new(
    output: Path = typer.Option(..., "--out", "-o", help="Path to output plan JSON file"),
    name: str = typer.Option("Untitled Floor Plan", "--name", "-n", help="Plan name"),
    metric: bool = typer.Option(False, "--metric", help="Use metric units"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Create an empty floor plan document."""
    _setup_logging(verbose)
    unit = MeasurementUnit.METRIC if metric else MeasurementUnit.IMPERIAL
    plan = FloorPlan(name=name, unit=unit)
    save_plan(plan, output)
    console.print(f"[green]Created plan '{name}' at {output}[/green]")


@app.command()
def info(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Path to plan JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show the walls, rooms and furniture of a plan."""
    _setup_logging(verbose)
    plan = _load(plan_path)

    walls = Table(title="Walls")
    walls.add_column("ID", style="cyan")
    walls.add_column("Start")
    walls.add_column("End")
    walls.add_column("Length", justify="right")
    for wall in plan.walls:
        walls.add_row(wall.id[:8], _fmt(wall.start), _fmt(wall.end), plan.format_measurement(wall.length))
    console.print(walls)

    rooms = Table(title="Rooms")
    rooms.add_column("Name", style="cyan")
    rooms.add_column("Type")
    rooms.add_column("Walls", justify="right")
    rooms.add_column("Area", justify="right")
    for room in plan.rooms:
        rooms.add_row(room.name, room.room_type.display_name, str(len(room.wall_ids)), f"{room_area(plan, room):.1f}")
    console.print(rooms)

    furniture = Table(title="Furniture")
    furniture.add_column("Name", style="cyan")
    furniture.add_column("Position")
    furniture.add_column("Size", justify="right")
    furniture.add_column("Rotation", justify="right")
    for item in plan.furniture_items:
        furniture.add_row(item.display_name, _fmt(item.position), f"{item.width:g} x {item.height:g}", f"{item.rotation:g}°")
    console.print(furniture)


@app.command()
def hit(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Path to plan JSON file"),
    x: float = typer.Option(..., "--x", help="X coordinate"),
    y: float = typer.Option(..., "--y", help="Y coordinate"),
    zoom: float = typer.Option(1.0, "--zoom", "-z", help="Canvas zoom factor"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Report the entity under a point."""
    _setup_logging(verbose)
    plan = _load(plan_path)
    if zoom <= 0:
        console.print("[red]Error: zoom must be positive[/red]")
        raise typer.Exit(1)

    entity = find_entity_at(Point(x, y), plan, zoom)
    if entity is None:
        console.print("Nothing at this point")
        raise typer.Exit(1)
    if isinstance(entity, WallHit):
        console.print(f"Wall [cyan]{entity.wall.id}[/cyan] ({entity.handle.value})")
    else:
        console.print(f"Furniture [cyan]{entity.display_name}[/cyan] ({entity.id})")


@app.command()
def place(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Path to plan JSON file"),
    furniture_type: FurnitureType = typer.Option(..., "--type", "-t", help="Furniture type"),
    x: float = typer.Option(..., "--x", help="X coordinate of the drop"),
    y: float = typer.Option(..., "--y", help="Y coordinate of the drop"),
    output: Path = typer.Option(None, "--out", "-o", help="Output path (defaults to the input)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Drop a catalog item onto the plan, snapped to the grid."""
    _setup_logging(verbose)
    session = EditorSession(_load(plan_path))
    payload = catalog_entry_for(furniture_type).to_drag_data()

    item = session.place_from_drop(payload, Point(x, y))
    if item is None:
        console.print("[red]Placement rejected: overlaps existing furniture[/red]")
        raise typer.Exit(1)

    save_plan(session.plan, output or plan_path)
    console.print(f"[green]Placed {item.name} at {_fmt(item.position)}[/green]")


@app.command()
def collisions(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Path to plan JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """List overlapping furniture."""
    _setup_logging(verbose)
    plan = _load(plan_path)
    pairs = colliding_pairs(plan.furniture_items)
    if not pairs:
        console.print("[bold green]No overlapping furniture[/bold green]")
        return

    table = Table(title="Overlapping furniture")
    table.add_column("First", style="cyan")
    table.add_column("Second", style="cyan")
    for first, second in pairs:
        table.add_row(first.display_name, second.display_name)
    console.print(table)
    raise typer.Exit(1)


@app.command()
def elevation(
    plan_path: Path = typer.Option(..., "--plan", "-p", help="Path to plan JSON file"),
    direction: ElevationDirection = typer.Option(ElevationDirection.NORTH, "--direction", "-d", help="View direction"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """List the walls visible in an elevation and their drawn size."""
    _setup_logging(verbose)
    plan = _load(plan_path)

    table = Table(title=f"{direction.value} Elevation")
    table.add_column("Wall", style="cyan")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")
    for wall in visible_walls(plan.walls, direction):
        width, height = elevation_extent(wall, plan.scale)
        table.add_row(wall.id[:8], f"{width:.1f}", f"{height:.1f}")
    console.print(table)


if __name__ == "__main__":
    app()
