from pathlib import Path
from typing import Annotated

import typer

from trackman_trajectory.cli._logging import configure_logging
from trackman_trajectory.cli._output import (
    print_error,
    print_frame,
    print_landing_points,
    print_scene,
    print_scene_summary,
    print_zone_locations,
)
from trackman_trajectory.config import SettingsError, TrajectorySettings, load_settings
from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.ingest.sources import load_pitches, source_for
from trackman_trajectory.render.view import ViewController, ViewPreset
from trackman_trajectory.services.scene import SceneController, build_pitch_path_scene
from trackman_trajectory.services.spray import landing_points

app = typer.Typer(name="tmt", help="Trackman trajectory reconstruction and render-space transforms")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Trackman trajectory reconstruction and render-space transforms."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_PathArg = Annotated[Path, typer.Argument(help="Pitch records (.json) or Trackman export (.csv)")]
_UidOpt = Annotated[str, typer.Option("--uid", help="Pitch UID to select")]
_ConfigDirOpt = Annotated[Path | None, typer.Option("--config-dir", help="Directory containing trackman.toml")]
_CatcherOpt = Annotated[bool, typer.Option("--catcher", help="Start from the locked catcher camera")]


def _load(path: Path) -> list[Pitch]:
    try:
        return load_pitches(source_for(path))
    except (OSError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _settings(config_dir: Path | None) -> TrajectorySettings:
    try:
        return load_settings(config_dir)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _find(pitches: list[Pitch], uid: str) -> Pitch:
    for p in pitches:
        if p.pitch_uid == uid:
            return p
    print_error(f"no pitch with uid '{uid}'")
    raise typer.Exit(code=1)


def _view(preset: ViewPreset, *, catcher: bool) -> ViewController:
    view = ViewController(preset)
    if catcher:
        view.set_catcher_view()
    return view


@app.command()
def scene(path: _PathArg, uid: _UidOpt, catcher: _CatcherOpt = False, config_dir: _ConfigDirOpt = None) -> None:
    """Print the derived scene for one pitch as JSON."""
    settings = _settings(config_dir)
    pitch = _find(_load(path), uid)
    controller = SceneController(settings)
    result = controller.select(pitch)
    print_scene_summary(result)
    print_scene(result, _view(result.views, catcher=catcher))


@app.command(name="path")
def pitch_path(path: _PathArg, uid: _UidOpt, catcher: _CatcherOpt = False, config_dir: _ConfigDirOpt = None) -> None:
    """Print the standalone pitch-path scene for one pitch as JSON."""
    settings = _settings(config_dir)
    result = build_pitch_path_scene(_find(_load(path), uid), settings)
    print_scene_summary(result)
    print_scene(result, _view(result.views, catcher=catcher))


@app.command()
def landing(path: _PathArg) -> None:
    """List spray-chart landing points for batted balls."""
    print_landing_points(landing_points(_load(path)))


@app.command()
def zone(path: _PathArg, config_dir: _ConfigDirOpt = None) -> None:
    """List plate locations projected onto the strike-zone canvas."""
    settings = _settings(config_dir)
    print_zone_locations(_load(path), settings.projector)


@app.command()
def frame(
    path: _PathArg,
    uid: _UidOpt,
    elapsed: Annotated[float, typer.Option("--elapsed", help="Seconds since the animation started")] = 0.0,
    config_dir: _ConfigDirOpt = None,
) -> None:
    """Print the animated marker position for one pitch at a given time."""
    settings = _settings(config_dir)
    pitch = _find(_load(path), uid)
    controller = SceneController(settings)
    controller.select(pitch)
    try:
        position = controller.frame(elapsed)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    if position is None:
        print_error(f"pitch '{uid}' has no trajectory to animate")
        raise typer.Exit(code=1)
    print_frame(uid, elapsed, position)
