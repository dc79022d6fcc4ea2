"""
Main CLI entry point for ufo-subset.
"""

from pathlib import Path

import click

from ufo_subset import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Reduce UFO font sources to small, self-consistent glyph subsets."""
    pass


@cli.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.argument("output_path", type=click.Path(path_type=Path))
@click.option(
    "--keep",
    "keep",
    multiple=True,
    help="Glyph name to keep in addition to Basic Latin. Repeatable.",
)
@click.option(
    "--no-default-names",
    is_flag=True,
    default=False,
    help="Do not keep the built-in glyph name list.",
)
def subset(input_path, output_path, keep, no_default_names):
    """Subset INPUT_PATH (.ufo) into a new UFO at OUTPUT_PATH."""
    from ufo_subset.config.glyphs import DEFAULT_KEEP_NAMES
    from ufo_subset.operations.subset import subset_ufo

    keep_names = set(keep)
    if not no_default_names:
        keep_names |= DEFAULT_KEEP_NAMES

    subset_ufo(input_path, output_path, keep_names)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
def validate(path):
    """Check that a subset UFO is self-consistent."""
    from ufo_subset.pipeline.validate import validate_subset

    validate_subset(path)


if __name__ == "__main__":
    cli()
