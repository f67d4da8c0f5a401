"""CLI entry point for diagram-layout."""

import json
import logging
import sys

import click

from diagram_layout.config import DEFAULT_PADDING, get_theme
from diagram_layout.icons import resolve_icons_sync
from diagram_layout.ir.spec import DiagramSpec
from diagram_layout.layout import full_layout
from diagram_layout.renderers import JsonRenderer, Renderer
from diagram_layout.types import Direction


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--direction", "-d", "direction", type=str, default=None, help="Override flow direction (TB, LR)")
@click.option("--theme", "-t", "theme", type=str, default="default", help="Theme name (default, dark)")
@click.option("--padding", "-p", "padding", type=int, default=DEFAULT_PADDING, help="Padding around the diagram in pixels")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--indent", "indent", type=int, default=2, help="JSON indentation (0 for compact output)")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout progress to stderr")
def main(
    input: str | None,
    direction: str | None,
    theme: str,
    padding: int,
    output: str | None,
    indent: int,
    verbose: bool,
) -> None:
    """Flow diagram spec (JSON) to positioned layout (JSON)."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        spec = DiagramSpec.from_dict(json.loads(text))
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        click.echo(f"error: invalid diagram spec: {e}", err=True)
        sys.exit(1)

    if direction is not None:
        key = direction.upper()
        if key not in Direction.__members__:
            click.echo(f"error: unknown direction '{direction}'; use TB or LR", err=True)
            sys.exit(1)
        spec.direction = Direction[key]

    if not spec.nodes:
        click.echo("error: diagram must have at least one node", err=True)
        sys.exit(1)

    try:
        theme_config = get_theme(theme)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    resolve_icons_sync(spec)
    result = full_layout(spec, theme_config, padding)

    renderer: Renderer = JsonRenderer(indent=indent or None)
    rendered = renderer.render(result)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
