import click
from dataclasses import replace
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.text import Text

from retricon.colors import RGBA, as_color_spec
from retricon.errors import RetriconError
from retricon.generator import generate
from retricon.styles import Style, apply_style, get_available_styles

STYLE_CHOICE = click.Choice([s.value for s in Style], case_sensitive=False)


def _color_value(value):
    """"0" and "1" are palette indices, anything else is a hex color."""
    if value is None:
        return None
    if value in ("0", "1"):
        return int(value)
    return value


def _build_options(style, tiles, tile_size, tile_padding, image_padding, tile_color, bg_color, vertical, horizontal):
    options = apply_style(style)
    overrides = {
        "tile_count": tiles,
        "tile_size": tile_size,
        "tile_padding": tile_padding,
        "image_padding": image_padding,
        "tile_color": as_color_spec(_color_value(tile_color)),
        "background_color": as_color_spec(_color_value(bg_color)),
        "vertical_symmetry": vertical,
        "horizontal_symmetry": horizontal,
    }
    return replace(options, **{k: v for k, v in overrides.items() if v is not None})


def _rich_style(color: RGBA) -> str:
    if color.a == 0:
        return ""
    return f"rgb({color.r},{color.g},{color.b})"


def grid_options(func):
    """Options shared by the commands that generate a grid."""
    decorators = [
        click.option("--style", type=STYLE_CHOICE, default=Style.DEFAULT.value, show_default=True, help="Style preset to start from."),
        click.option("--tiles", type=int, help="Number of tiles per side."),
        click.option("--tile-size", type=int, help="Tile side length in pixels."),
        click.option("--tile-padding", type=int, help="Padding around each tile."),
        click.option("--image-padding", type=int, help="Padding around the whole image."),
        click.option("--tile-color", help="Tile color: palette index 0 or 1, otherwise RRGGBB."),
        click.option("--bg-color", help="Background color: palette index 0 or 1, otherwise RRGGBB."),
        click.option("--vertical/--no-vertical", default=None, help="Mirror left half onto the right."),
        click.option("--horizontal/--no-horizontal", default=None, help="Mirror top half onto the bottom."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.version_option(package_name="retricon")
def cli():
    """Generate deterministic identicons from text keys."""
    pass


@cli.command("render")
@click.argument("key")
@grid_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default="retricon.png",
    show_default=True,
    help="Image file to write; the format follows the extension.",
)
def render_command(key, style, tiles, tile_size, tile_padding, image_padding, tile_color, bg_color, vertical, horizontal, output):
    """Renders the identicon for KEY to an image file."""
    try:
        options = _build_options(style, tiles, tile_size, tile_padding, image_padding, tile_color, bg_color, vertical, horizontal)
        icon = generate(key, options)
        image = icon.render()
    except RetriconError as e:
        raise click.ClickException(str(e))

    output_path = Path(output)
    try:
        image.save(output_path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Could not write {output_path}: {e}")

    click.echo(f"Wrote {icon.canvas_size}x{icon.canvas_size} identicon to {output_path}")


@cli.command("show")
@click.argument("key")
@grid_options
def show_command(key, style, tiles, tile_size, tile_padding, image_padding, tile_color, bg_color, vertical, horizontal):
    """Prints the identicon grid for KEY in the terminal."""
    try:
        options = _build_options(style, tiles, tile_size, tile_padding, image_padding, tile_color, bg_color, vertical, horizontal)
        icon = generate(key, options)
    except RetriconError as e:
        raise click.ClickException(str(e))

    console = Console()
    on_style = _rich_style(icon.foreground)
    off_style = _rich_style(icon.background)

    text = Text()
    for row in icon.grid:
        for cell in row:
            if cell:
                text.append("██", style=on_style)
            else:
                text.append("··", style=off_style)
        text.append("\n")

    console.print(text, end="")
    console.print(
        f"[dim]{icon.dimension}x{icon.dimension} {icon.mode.value} | "
        f"fg #{icon.foreground.hex()} bg #{icon.background.hex()}[/dim]"
    )


@cli.command("styles")
def styles_command():
    """Lists the available style presets."""
    table = Table(title="Retricon styles")
    table.add_column("Style", style="cyan")
    table.add_column("Tiles", justify="right")
    table.add_column("Canvas", justify="right")
    table.add_column("Description")

    for name, info in get_available_styles().items():
        table.add_row(
            name,
            str(info["options"]["tile_count"]),
            f"{info['canvas_size']}px",
            info["description"],
        )

    Console().print(table)


if __name__ == "__main__":
    cli()
