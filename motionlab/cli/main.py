"""Main CLI entry point for MotionLab."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from motionlab.config import Settings
from motionlab.logging_config import configure_logging
from motionlab.models.parameters import (
    ModuleKind,
    MotionParameters,
    default_parameters,
    parameters_for,
    resolve_module,
)

app = typer.Typer(
    name="motionlab",
    help="MotionLab - ask physics questions, animate the answer",
    add_completion=False,
)
console = Console()


def _setup(verbose: bool = False) -> Settings:
    settings = Settings.from_env()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_json)
    return settings


def _module_or_exit(name: str) -> ModuleKind:
    try:
        return resolve_module(name)
    except ValueError:
        console.print(f"[red]Unknown module: {name}[/red]")
        console.print("[yellow]Use one of: projectile, spring, pendulum, wave[/yellow]")
        raise typer.Exit(1)


def _parse_overrides(pairs: Optional[list[str]]) -> dict[str, Any]:
    """``["mass=2", "waveType=longitudinal"]`` -> ``{"mass": 2.0, ...}``."""
    overrides: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            console.print(f"[red]Expected key=value, got: {pair}[/red]")
            raise typer.Exit(1)
        try:
            overrides[key.strip()] = float(raw)
        except ValueError:
            overrides[key.strip()] = raw.strip()
    return overrides


def _build_parameters(
    kind: ModuleKind,
    preset: Optional[str],
    params: Optional[list[str]],
) -> MotionParameters:
    from pydantic import ValidationError

    from motionlab.simulation.presets import get_preset

    base = default_parameters(kind)
    if preset:
        try:
            base = get_preset(kind, preset).params
        except KeyError as e:
            console.print(f"[red]{e.args[0]}[/red]")
            raise typer.Exit(1)

    try:
        return parameters_for(kind, {**base.to_inputs(), **_parse_overrides(params)})
    except ValidationError as e:
        console.print(f"[red]Invalid parameters:[/red]\n{e}")
        raise typer.Exit(1)


def _parameters_table(params: MotionParameters) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")
    for key, value in params.to_inputs().items():
        table.add_row(key, str(value))
    return table


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="A physics question"),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Skip the language model and use keyword matching only",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider", "-p",
        help="LLM provider (gemini, anthropic, openai)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response payload"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Classify a question the way the chat endpoint does.

    Example:
        motionlab ask "Show me a pendulum with length 2m"
    """
    from motionlab.classify.providers.base import LLMProviderType
    from motionlab.config import resolve_api_key
    from motionlab.engine import PhysicsTutor

    settings = _setup(verbose)
    settings.offline = settings.offline or offline
    if provider:
        try:
            settings.provider = LLMProviderType(provider.lower())
        except ValueError:
            console.print(f"[red]Unknown provider: {provider}[/red]")
            raise typer.Exit(1)
        settings.api_key = resolve_api_key(settings.provider)

    tutor = PhysicsTutor(settings=settings)
    result = asyncio.run(tutor.ask(prompt))

    if as_json:
        console.print_json(json.dumps(result.to_payload()))
        return

    title = result.module.value if result.module else "No animation"
    console.print(Panel(result.explanation, title=title, border_style="blue"))
    if result.inputs is not None:
        console.print(_parameters_table(result.inputs))
    console.print(f"[dim]source: {result.source}[/dim]")


@app.command()
def evaluate(
    module: str = typer.Argument(..., help="projectile, spring, pendulum or wave"),
    time: float = typer.Option(0.0, "--time", "-t", min=0.0, help="Elapsed time in seconds"),
    x_pos: float = typer.Option(0.0, "--x", help="Position along the medium (waves)"),
    preset: Optional[str] = typer.Option(None, "--preset", help="Start from a named preset"),
    params: Optional[list[str]] = typer.Option(
        None,
        "--param", "-P",
        help="Parameter override, e.g. -P mass=2 -P damping=0.5",
    ),
):
    """Evaluate one motion at one instant."""
    from motionlab.physics.evaluator import evaluate as evaluate_motion

    kind = _module_or_exit(module)
    motion = _build_parameters(kind, preset, params)
    result = evaluate_motion(motion, time, x_pos)

    table = Table(show_header=False, box=None)
    table.add_column("Quantity", style="cyan")
    table.add_column("Value")

    table.add_row("Time", f"{result.time:.2f} s")
    table.add_row("Displacement", f"{result.displacement:.4f}")
    table.add_row("Natural Frequency", f"{result.natural_frequency:.2f} rad/s")
    table.add_row("Period", f"{result.period:.2f} s")
    table.add_row("Damping Ratio", f"{result.damping_ratio:.2f}")
    if result.regime is not None:
        table.add_row("Regime", result.regime.value)
    if result.position is not None:
        table.add_row("Position", f"({result.position[0]:.3f}, {result.position[1]:.3f})")
    for key, value in result.extras.items():
        table.add_row(key.replace("_", " ").title(), f"{value:.3f}")

    console.print(Panel.fit(f"[bold]{kind.value}[/bold]", border_style="blue"))
    console.print(table)


@app.command()
def simulate(
    module: str = typer.Argument(..., help="projectile, spring, pendulum or wave"),
    ticks: int = typer.Option(
        100,
        "--ticks", "-n",
        min=1,
        help="Number of clock ticks (a projectile stops early when it lands)",
    ),
    preset: Optional[str] = typer.Option(None, "--preset"),
    params: Optional[list[str]] = typer.Option(None, "--param", "-P"),
    realtime: bool = typer.Option(False, "--realtime", "-r", help="Pace ticks in wall-clock time"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Run an animation headlessly and print its frames."""
    from motionlab.simulation.session import AnimationSession

    _setup(verbose)
    kind = _module_or_exit(module)
    motion = _build_parameters(kind, preset, params)

    session = AnimationSession(motion)

    table = Table(title=f"{kind.value} frames")
    table.add_column("t (s)", justify="right")
    table.add_column("Displacement", justify="right")
    table.add_column("Position", justify="right")

    def add_frame(snapshot) -> None:
        evaluation = snapshot.evaluation
        position = evaluation.position or (0.0, 0.0)
        table.add_row(
            f"{evaluation.time:.2f}",
            f"{evaluation.displacement:.4f}",
            f"({position[0]:.3f}, {position[1]:.3f})",
        )

    state = asyncio.run(session.run(max_ticks=ticks, realtime=realtime, on_tick=add_frame))

    console.print(table)
    console.print(
        f"[green]{len(table.rows)} frames, t = {state.time:.2f} s, "
        f"{'running' if state.is_running else 'halted'}, trail {len(state.trail)} points[/green]"
    )


@app.command()
def presets(
    module: str = typer.Argument(..., help="projectile, spring, pendulum or wave"),
):
    """List the quick presets for a module."""
    from motionlab.simulation.presets import presets_for

    kind = _module_or_exit(module)

    table = Table(title=f"{kind.value} presets")
    table.add_column("Name", style="cyan")
    table.add_column("Parameters")
    for preset in presets_for(kind):
        values = ", ".join(f"{k}={v}" for k, v in preset.params.to_inputs().items())
        table.add_row(preset.name, values)

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", "-h"),
    port: int = typer.Option(8000, "--port", "-p"),
    reload: bool = typer.Option(False, "--reload", "-r"),
):
    """
    Start the API server.
    """
    import uvicorn

    _setup()
    console.print(f"[green]Starting server at http://{host}:{port}[/green]")

    uvicorn.run(
        "motionlab.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def version():
    """Show version information."""
    from motionlab import __version__

    console.print(f"MotionLab v{__version__}")


if __name__ == "__main__":
    app()
