import json

import click

from specfunpy.batch import SpecFun
from specfunpy.catalogue import names
from specfunpy.precision import PrecisionTier


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.option(
    "--config",
    required=True,
    type=str,
    help="Specify the path to the batch file to be evaluated.",
)
@click.option(
    "--output",
    type=str,
    default="",
    help="File path (json or yaml) for the results. Prints to stdout if omitted.",
)
@click.option(
    "--precision",
    type=click.Choice([tier.value for tier in PrecisionTier]),
    default=None,
    help="Overrides the default precision given in the batch file.",
)
def evaluate(config: str, output: str, precision: str | None) -> None:
    handler = SpecFun(config, precision=precision or "")
    export = handler.run()
    if output:
        export.save(output)
    else:
        click.echo(json.dumps(export.model_dump(), indent=4))
    if export.failures:
        raise SystemExit(1)


@cli.command()
def tiers() -> None:
    for tier in PrecisionTier:
        state = "available" if tier.available else "unavailable"
        click.echo(f"{tier.value}: {state} ({tier.mantissa_bits}-bit mantissa)")


@cli.command()
def functions() -> None:
    for name in names():
        click.echo(name)
