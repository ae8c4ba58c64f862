from typing import Optional
import typer
from pydantic import ValidationError
from diceroll.engine.dice import roll_many
from diceroll.engine.report import render_result
from diceroll.engine.request import RollInputError, build_request
from diceroll.engine.rng import make_rng
from diceroll.engine.settings import load_settings
from diceroll.util.log import setup_logging

app = typer.Typer(add_completion=False,
                  help="Rolls dice of a given number of sides and adds modifiers")

def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)

@app.command()
def roll(
    sides: Optional[str] = typer.Option(None, "-d", "--sides", help="how many sides the die has (required)"),
    number: str = typer.Option("1", "-n", "--number", help="how many dice to roll"),
    advantage: bool = typer.Option(False, "-a", "--advantage", help="roll with advantage"),
    modifier: str = typer.Option("0", "-m", "--mod", metavar="MOD", help="modifiers to add to the roll"),
    keep: Optional[str] = typer.Option(None, "-k", "--keep", help="how many dice to keep"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="print the individual rolls"),
    times: str = typer.Option("1", "-t", "--times", help="how many times to roll"),
    floor_at_zero: bool = typer.Option(False, "--floor", help="never report a total below zero"),
    seed: Optional[str] = typer.Option(None, "--seed", help="seed the dice for a repeatable roll"),
):
    # every validation failure ends up here; nothing below exits on its own
    try:
        settings = load_settings()
    except ValidationError as e:
        field = ".".join(str(p) for p in e.errors()[0].get("loc", ()))
        _fail(f"Invalid DICEROLL_{field.upper()} environment setting")
    try:
        request = build_request(sides, number, advantage, modifier, keep, times,
                                verbose, floor_at_zero or settings.floor_at_zero, seed)
    except RollInputError as e:
        _fail(e.message)

    log = setup_logging(settings.log_level)
    seed_value = request.seed if request.seed is not None else settings.seed
    log.info("rolling %s x%d (seed=%s, floor=%s)", request.spec.label, request.times,
             seed_value, request.floor_at_zero)
    rng = make_rng(seed_value)
    for result in roll_many(request.spec, rng, request.times, request.floor_at_zero):
        for line in render_result(request.spec, result, request.verbose):
            typer.echo(line)


if __name__ == "__main__":
    app()
