"""Command-line interface for pitchcircle.

Provides commands for:
- detect: Identify the chord in a set of pitches and list next chords
- transpose: Rotate a set of pitches by semitones
- mirror: Invert a set of pitches around an axis pitch
- rotate: Turn a circle layout by slots
- circle: Show the dot positions and interval lines of a layout
- numerals: Show the functional-harmony grammar
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import PITCH_NAMES, is_pitch_name, FIFTHS_INTERVAL, CHROMATIC_INTERVAL
from .core.constants import DEFAULT_CANVAS_SIZE
from .inference import NUMERALS
from .model import Verticality, RecordingDevice
from .geometry import CircleLayout, LayoutConfig

app = typer.Typer(
    name="pitchcircle",
    help="Pitch-set model for chord detection and circle transforms",
    rich_markup_mode="markdown",
)
console = Console()

# Canvas colour names that rich does not know
RICH_COLORS = {"lime": "#00ff00"}

LAYOUT_INTERVALS = {
    "fifths": FIFTHS_INTERVAL,
    "chromatic": CHROMATIC_INTERVAL,
}


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show debug logging"
    ),
):
    """Pitch names are the letters **c n d s e f t g l a h b** (c = 0)."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def parse_pitches(args: Optional[List[str]]) -> List[str]:
    """
    Split arguments into pitch names, skipping unknown symbols.

    Arguments may be single names ("c e g") or runs of names ("ceg").
    """
    names = []
    for arg in args or []:
        for symbol in arg.strip().lower():
            if is_pitch_name(symbol):
                names.append(symbol)
            else:
                console.print(f"[yellow]Ignoring unknown pitch '{symbol}'[/yellow]")
    return names


def _build(pitches: Optional[List[str]], trace_sound: bool = False) -> Verticality:
    device = RecordingDevice() if trace_sound else None
    verticality = Verticality(parse_pitches(pitches), device=device)
    if trace_sound:
        verticality.play()
    return verticality


def _layout_config(layout: str) -> LayoutConfig:
    key = layout.lower()
    if key not in LAYOUT_INTERVALS:
        console.print(f"[red]Unknown layout '{layout}' (use fifths or chromatic)[/red]")
        raise typer.Exit(1)
    width, height = DEFAULT_CANVAS_SIZE
    return LayoutConfig.for_canvas(width, height, interval=LAYOUT_INTERVALS[key])


@app.command()
def detect(
    pitches: Optional[List[str]] = typer.Argument(None, help="Active pitches, e.g. c e g"),
):
    """Identify the chord in a set of pitches and list legal next chords.

    **Examples:**

        pitchcircle detect c e g

        pitchcircle detect csg
    """
    verticality = _build(pitches)
    _show_state(verticality)
    _show_chord(verticality)


@app.command()
def transpose(
    pitches: Optional[List[str]] = typer.Argument(None, help="Active pitches"),
    by: int = typer.Option(7, "-n", "--by", help="Semitones to transpose by"),
    trace_sound: bool = typer.Option(
        False, "--trace-sound", help="Show the sound requests made while playing"
    ),
):
    """Rotate a set of pitches by a number of semitones."""
    verticality = _build(pitches, trace_sound)
    verticality.transpose(by)
    _show_state(verticality)
    _show_chord(verticality)
    if trace_sound:
        _show_sound_events(verticality.device)


@app.command()
def mirror(
    pitches: Optional[List[str]] = typer.Argument(None, help="Active pitches"),
    center: str = typer.Option("c", "-c", "--center", help="Axis pitch"),
    trace_sound: bool = typer.Option(
        False, "--trace-sound", help="Show the sound requests made while playing"
    ),
):
    """Invert a set of pitches around an axis pitch."""
    if not is_pitch_name(center):
        console.print(f"[red]Error: Unknown axis pitch '{center}'[/red]")
        raise typer.Exit(1)

    verticality = _build(pitches, trace_sound)
    verticality.mirror(center)
    _show_state(verticality)
    _show_chord(verticality)
    if trace_sound:
        _show_sound_events(verticality.device)


@app.command()
def rotate(
    pitches: Optional[List[str]] = typer.Argument(None, help="Active pitches"),
    steps: int = typer.Option(1, "-s", "--steps", help="Slots to rotate the circle by"),
    layout: str = typer.Option("fifths", "-l", "--layout", help="fifths or chromatic"),
):
    """Turn a circle layout by a number of slots."""
    config = _layout_config(layout)
    verticality = _build(pitches)
    circle_layout = CircleLayout(verticality, config)
    circle_layout.rotate(steps)
    console.print(
        f"[blue]Rotated {layout} circle by {steps} slot(s)[/blue] "
        f"= {steps * circle_layout.interval} semitones"
    )
    _show_state(verticality)
    _show_chord(verticality)


@app.command()
def circle(
    pitches: Optional[List[str]] = typer.Argument(None, help="Active pitches"),
    layout: str = typer.Option("fifths", "-l", "--layout", help="fifths or chromatic"),
):
    """Show dot positions and interval lines for a circle layout."""
    config = _layout_config(layout)
    verticality = _build(pitches)
    circle_layout = CircleLayout(verticality, config)

    table = Table(title=f"Circle ({layout}, step {circle_layout.interval})")
    table.add_column("Slot", style="cyan")
    table.add_column("Pitch", style="green")
    table.add_column("On", style="magenta")
    table.add_column("x", style="yellow")
    table.add_column("y", style="yellow")

    for slot, name in enumerate(circle_layout.slots()):
        x, y = circle_layout.position(name)
        table.add_row(
            str(slot),
            name,
            "●" if verticality.is_on(name) else "",
            f"{x:.1f}",
            f"{y:.1f}",
        )
    console.print(table)

    edges = circle_layout.edges()
    if edges:
        edge_table = Table(title="Interval Lines")
        edge_table.add_column("From", style="cyan")
        edge_table.add_column("To", style="cyan")
        edge_table.add_column("Quality")
        for placed in edges:
            edge = placed.edge
            color = RICH_COLORS.get(edge.color, edge.color)
            edge_table.add_row(
                edge.source,
                edge.target,
                f"[{color}]{edge.quality}[/{color}]",
            )
        console.print(edge_table)


@app.command()
def numerals():
    """Show the functional-harmony grammar."""
    table = Table(title="Functional Numerals")
    table.add_column("Numeral", style="cyan")
    table.add_column("Quality", style="green")
    table.add_column("Root", style="yellow")
    table.add_column("Next", style="magenta")

    for numeral in NUMERALS.values():
        table.add_row(
            numeral.name,
            numeral.quality,
            f"+{numeral.relative_root}",
            " ".join(numeral.destinations),
        )
    console.print(table)


def _show_state(verticality: Verticality):
    """Display the 12 cells on one line."""
    cells = " ".join(
        f"[bold green]{name}[/bold green]" if verticality.is_on(name) else f"[dim]{name}[/dim]"
        for name in PITCH_NAMES
    )
    console.print(f"Pitches: {cells}")


def _show_chord(verticality: Verticality):
    """Display the detected chord and its transitions in a table."""
    chord = verticality.chord
    if chord is None:
        console.print("[yellow]No chord detected[/yellow]")
        return

    console.print(
        f"Chord: [bold cyan]{chord.symbol}[/bold cyan] "
        f"({chord.root} {chord.quality}, {chord.spelling})"
    )

    transitions = verticality.transitions
    if not transitions:
        return

    table = Table(title="Next Chords")
    table.add_column("As", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Next", style="yellow")
    table.add_column("Chord", style="magenta")
    table.add_column("Pitches")

    for transition in transitions:
        table.add_row(
            transition.source,
            transition.key,
            transition.numeral,
            transition.chord.symbol,
            transition.chord.spelling,
        )
    console.print(table)


def _show_sound_events(device: RecordingDevice):
    """Display recorded sound requests."""
    events = " ".join(
        f"[green]+{pitch}[/green]" if kind == "start" else f"[red]-{pitch}[/red]"
        for kind, pitch in device.events
    )
    console.print(f"Sound: {events}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
