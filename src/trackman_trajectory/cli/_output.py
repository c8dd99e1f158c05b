import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackman_trajectory.domain.geometry import RenderPoint
from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.render.classifier import classify_pitch_call
from trackman_trajectory.render.projector import ProjectorConfig, project
from trackman_trajectory.render.zone import is_in_zone
from trackman_trajectory.render.view import ViewController
from trackman_trajectory.services.scene import PitchPathScene, PitchScene
from trackman_trajectory.services.spray import LandingMarker

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_scene(scene: PitchScene | PitchPathScene, view: ViewController) -> None:
    data = scene.to_dict()
    data["camera"] = {
        "mode": view.mode.value,
        **view.pose.as_dict(),
        "controls_enabled": view.controls_enabled,
        "default": scene.views.default.as_dict(),
        "catcher": scene.views.catcher.as_dict(),
    }
    console.print_json(json.dumps(data))


def print_scene_summary(scene: PitchScene | PitchPathScene) -> None:
    for error in scene.skipped:
        err_console.print(f"[yellow]Skipped[/yellow] {type(error).__name__}: {escape(error.message)}")


def print_landing_points(markers: list[LandingMarker]) -> None:
    if not markers:
        console.print("No batted balls with a usable trajectory.")
        return
    table = Table(title="Landing points")
    table.add_column("Pitch")
    table.add_column("Result")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Z", justify="right")
    for m in markers:
        table.add_row(
            m.pitch_uid,
            f"[{m.color}]{m.play_result}[/]",
            f"{m.position.x:.2f}",
            f"{m.position.y:.2f}",
            f"{m.position.z:.2f}",
        )
    console.print(table)


def print_zone_locations(pitches: list[Pitch], config: ProjectorConfig) -> None:
    table = Table(title="Plate locations")
    table.add_column("Pitch")
    table.add_column("Call")
    table.add_column("SVG x", justify="right")
    table.add_column("SVG y", justify="right")
    table.add_column("In zone")
    shown = 0
    for p in pitches:
        side, height = p.metrics.plate_loc_side, p.metrics.plate_loc_height
        if side is None or height is None:
            continue
        point = project(side, height, config)
        color = classify_pitch_call(p.pitch_call).color
        call = p.pitch_call or "-"
        table.add_row(
            p.pitch_uid,
            f"[{color}]{call}[/]",
            f"{point.x:.1f}",
            f"{point.y:.1f}",
            "yes" if is_in_zone(side, height) else "no",
        )
        shown += 1
    if not shown:
        console.print("No pitches with a plate location.")
        return
    console.print(table)


def print_frame(pitch_uid: str, elapsed: float, position: RenderPoint) -> None:
    console.print(
        f"[bold]{pitch_uid}[/bold] @ {elapsed:.3f}s: x={position.x:.4f} y={position.y:.4f} z={position.z:.4f}"
    )
