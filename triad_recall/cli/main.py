"""Main entry point for the Triad Recall CLI."""

from typing import Optional, Tuple

import click
import pyfiglet

from ..core.config import ConfigManager
from ..logger import get_logger
from ..logging_config import setup_logging
from ..note_types import Note
from ..note_utils import (
    DIFFICULTY_LEVELS,
    MAX_FRET,
    TRIAD_QUALITIES,
    is_valid_fret,
    is_valid_neck_position,
)
from ..services.database import TriadDatabase, build_triad_database, save_triad_database
from ..services.fretboard import (
    TUNINGS,
    Tuning,
    find_note_on_fretboard,
    get_tuning,
    map_triad_to_fretboard,
)
from ..services.intervals import calculate_interval, invert_interval, is_consonant
from ..services.triads import generate_triad
from ..services.voicings import generate_chord_voicings

logger = get_logger(__name__)


def _parse_note(ctx, param, value):
    if value is None:
        return None
    try:
        return Note.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _fretboard_setting_error(ctx: click.Context, message: str) -> click.ClickException:
    config_file = ctx.obj.config_dir / "fretboard.json"
    return click.ClickException(f"{message} (check {config_file})")


def _resolve_tuning(ctx: click.Context, tuning: Optional[str]) -> Tuple[str, Tuning]:
    """Tuning name and notes from the option, falling back to the configured tuning."""
    if tuning:
        return tuning, get_tuning(tuning)

    name = ctx.obj.get_config("fretboard").get("tuning")
    try:
        return name, get_tuning(name)
    except ValueError as e:
        raise _fretboard_setting_error(ctx, f"Configured tuning is invalid: {e}")


def _max_fret(ctx: click.Context, max_fret: Optional[int]) -> int:
    if max_fret is not None:
        return max_fret

    configured = ctx.obj.get_config("fretboard").get("max_fret")
    if not is_valid_fret(configured):
        raise _fretboard_setting_error(
            ctx, f"Configured max_fret must be 0-{MAX_FRET}, got {configured!r}"
        )
    return configured


def _check_neck_position(ctx, param, value):
    if value is not None and not is_valid_neck_position(value):
        raise click.BadParameter(f"must be between 0 and {MAX_FRET}")
    return value


tuning_option = click.option(
    "--tuning",
    type=click.Choice(sorted(TUNINGS)),
    default=None,
    help="Named tuning (defaults to the configured tuning)",
)
quality_option = click.option(
    "--quality",
    "-q",
    type=click.Choice(TRIAD_QUALITIES),
    default="major",
    show_default=True,
    help="Triad quality",
)


@click.group()
@click.option("--log-level", default=None, help="Override log level (e.g. DEBUG)")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Configuration directory (default ~/.config/triad_recall)",
)
@click.pass_context
def cli(ctx, log_level, config_dir):
    """Triad Recall - guitar triads on the fretboard."""
    setup_logging(log_level)
    ctx.obj = ConfigManager(config_dir)


@cli.command()
@click.argument("root", callback=_parse_note)
@quality_option
@click.option("--banner", is_flag=True, help="Print the chord symbol as a large banner")
def triad(root, quality, banner):
    """Show the chord tones of a triad."""
    t = generate_triad(Note(root.name), quality)
    if banner:
        click.echo(pyfiglet.figlet_format(t.symbol))
    click.echo(f"{t.symbol} ({quality})")
    click.echo(f"  root:  {t.root}")
    click.echo(f"  third: {t.third}")
    click.echo(f"  fifth: {t.fifth}")


@cli.command()
@click.argument("from_note", callback=_parse_note)
@click.argument("to_note", callback=_parse_note)
def interval(from_note, to_note):
    """Name the ascending interval between two notes."""
    iv = calculate_interval(from_note, to_note)
    click.echo(f"{from_note} -> {to_note}: {iv.name} ({iv.semitones} semitones, {iv.quality})")
    click.echo(f"  inversion: {invert_interval(iv.semitones)} semitones")
    click.echo(f"  consonant: {'yes' if is_consonant(iv.semitones) else 'no'}")


@cli.command()
@click.argument("note", callback=_parse_note)
@tuning_option
@click.option("--max-fret", type=click.IntRange(0, 24), default=None)
@click.pass_context
def find(ctx, note, tuning, max_fret):
    """List every place a note sounds on the neck."""
    name, tuning_notes = _resolve_tuning(ctx, tuning)
    positions = find_note_on_fretboard(note, tuning_notes, _max_fret(ctx, max_fret))
    click.echo(f"{note.name} in {name} tuning:")
    for p in positions:
        click.echo(f"  string {p.string} fret {p.fret}")


@cli.command(name="map")
@click.argument("root", callback=_parse_note)
@quality_option
@tuning_option
@click.option("--max-fret", type=click.IntRange(0, 24), default=None)
@click.pass_context
def map_command(ctx, root, quality, tuning, max_fret):
    """List the chord tones of a triad across the neck."""
    t = generate_triad(Note(root.name), quality)
    name, tuning_notes = _resolve_tuning(ctx, tuning)
    positions = map_triad_to_fretboard(t, tuning_notes, _max_fret(ctx, max_fret))
    click.echo(f"{t.symbol} in {name} tuning:")
    for p in positions:
        click.echo(f"  string {p.string} fret {p.fret:>2}: {p.note.name:<2} ({p.role})")


@cli.command()
@click.argument("root", callback=_parse_note)
@quality_option
@tuning_option
@click.option("--difficulty", type=click.Choice(DIFFICULTY_LEVELS), default=None)
@click.pass_context
def voicings(ctx, root, quality, tuning, difficulty):
    """Show playable shapes of a triad."""
    t = generate_triad(Note(root.name), quality)
    _, tuning_notes = _resolve_tuning(ctx, tuning)
    settings = ctx.obj.get_config("voicings")
    difficulty = difficulty or settings.get("difficulty")

    results = generate_chord_voicings(t, tuning_notes)
    if difficulty:
        results = [v for v in results if v.difficulty == difficulty]

    if not results:
        click.echo(f"No playable {t.symbol} shapes found")
        return

    for v in results:
        line = f"{t.symbol} @ {v.neck_position:>2} [{v.difficulty}] {v.shape}"
        if settings.get("show_tab", True):
            line += f"  {v.to_tab(len(tuning_notes))}"
        click.echo(line)


@cli.command(name="build-db")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None)
@tuning_option
@click.pass_context
def build_db(ctx, output, tuning):
    """Precompute the triad database and write it as JSON."""
    name, tuning_notes = _resolve_tuning(ctx, tuning)
    path = output or ctx.obj.database_path()
    database = build_triad_database(tuning_notes, name)
    if not save_triad_database(database, path):
        raise click.ClickException(f"Could not write database to {path}")
    stats = database["stats"]
    click.echo(
        f"Wrote {stats['total_triads']} triads and {stats['total_voicings']} voicings to {path}"
    )


@cli.command()
@click.option("--root", default=None, help="Root note (flats accepted)")
@click.option("--quality", type=click.Choice(TRIAD_QUALITIES), default=None)
@click.option("--difficulty", type=click.Choice(DIFFICULTY_LEVELS), default=None)
@click.option("--neck-position", type=int, default=None, callback=_check_neck_position)
@click.option("--max-fret", type=int, default=None)
@click.option("--no-open", is_flag=True, help="Exclude shapes with open strings")
@click.option("--random", "pick_random", is_flag=True, help="Pick one random triad")
@click.pass_context
def lookup(ctx, root, quality, difficulty, neck_position, max_fret, no_open, pick_random):
    """Query the triad database."""
    path = ctx.obj.database_path()
    database = TriadDatabase.from_file(path) if path.exists() else None
    if database is None:
        logger.info(f"No usable database at {path}, building in memory")
        database = TriadDatabase()

    if pick_random:
        entry = database.get_random_triad(quality)
        if entry is None:
            raise click.ClickException("No triad matches")
        click.echo(entry["triad"]["symbol"])
        return

    found = database.find_voicings(
        root=root,
        quality=quality,
        difficulty=difficulty,
        neck_position=neck_position,
        max_fret=max_fret,
        include_open_strings=not no_open,
    )
    for v in found:
        click.echo(f"{v['triad']['symbol']:<4} {v['difficulty']:<12} {v['neck_position']:>2} {v['tab']}")
    click.echo(f"{len(found)} voicings")


def main(args=None) -> None:
    """Run the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv
    """
    cli.main(args=args, prog_name="triad-recall")


if __name__ == "__main__":
    main()
