"""
Noise texture CLI commands for texsmith.

Command line interface for generating noise textures and resolving seed
strings.

Author: B.G.
"""

import sys

import click

import texsmith as ts
from texsmith.errors import EncodingFailure, GenerationError


@click.command()
@click.option("--width", "-W", default=ts.constants.DEFAULT_WIDTH, show_default=True, type=float, help="Texture width in pixels (32-4096)")
@click.option("--height", "-H", default=ts.constants.DEFAULT_HEIGHT, show_default=True, type=float, help="Texture height in pixels (32-4096)")
@click.option(
    "--variant",
    type=click.Choice([v.value for v in ts.noise.NoiseVariant], case_sensitive=False),
    default=ts.constants.DEFAULT_VARIANT,
    show_default=True,
    help="Noise look",
)
@click.option("--intensity", default=ts.constants.DEFAULT_INTENSITY, show_default=True, type=float, help="Noise amplitude / speck density (0-1)")
@click.option("--alpha", default=ts.constants.DEFAULT_ALPHA, show_default=True, type=float, help="Opacity multiplier (0-1)")
@click.option("--contrast", default=ts.constants.DEFAULT_CONTRAST, show_default=True, type=float, help="Midtone spread (0-1)")
@click.option("--scale", default=ts.constants.DEFAULT_SCALE, show_default=True, type=int, help="Grain block size in pixels")
@click.option("--seed", default=None, type=str, help="Integer seed or seed string (random if omitted)")
@click.option("--tint", default=ts.constants.DEFAULT_TINT, show_default=True, help="Tint colour (#rgb, #rrggbb or rgb(r,g,b))")
@click.option("--tint-strength", default=ts.constants.DEFAULT_TINT_STRENGTH, show_default=True, type=float, help="Blend weight toward the tint (0-1)")
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Output image file, format from suffix (default: noise-<variant>-<w>x<h>.png)",
)
@click.option("--data-url", is_flag=True, default=False, help="Print a base64 PNG data URL instead of writing a file")
@click.option("--preview", is_flag=True, default=False, help="Show the texture in a matplotlib window")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise(width, height, variant, intensity, alpha, contrast, scale, seed, tint,
          tint_strength, output, data_url, preview, verbose):
    """
    Generate a deterministic noise texture.

    The same options and seed always produce the same pixels. The seed used
    is reported so a random texture can be regenerated later.

    Examples:

        # 512x512 film grain PNG
        texsmith-noise --seed 1234

        # Sparse dust, larger specks, written as WebP
        texsmith-noise --variant dust --intensity 0.9 --scale 3 -o dust.webp

        # Warm scan lines as a data URL
        texsmith-noise --variant lines --tint "#ffb070" --tint-strength 0.6 --data-url
    """
    try:
        opts = ts.noise.GenerationOptions(
            width=width,
            height=height,
            variant=variant,
            intensity=intensity,
            alpha=alpha,
            contrast=contrast,
            scale=scale,
            seed=seed,
            tint=tint,
            tint_strength=tint_strength,
        )
        if verbose:
            click.echo(f"Generating {opts.variant.value} texture {opts.width}x{opts.height} (seed={opts.seed})...", err=data_url)

        buf = ts.generate(opts)

        if data_url:
            click.echo(ts.export.to_data_url(buf))
        elif output is not None or not preview:
            path = ts.export.save(buf, output or ts.export.default_filename(opts))
            click.echo(f"Saved '{path}' (seed={opts.seed})")

        if preview:
            import matplotlib.pyplot as plt

            ts.visu.show_texture(buf)
            plt.show()

    except GenerationError as e:
        click.echo(f"Error: Invalid parameters - {e}", err=True)
        sys.exit(1)

    except EncodingFailure as e:
        click.echo(f"Error: Encoding failed - {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("text")
def seed(text):
    """Print the numeric seed for a seed string TEXT."""
    click.echo(ts.rng.string_to_seed(text))


if __name__ == "__main__":
    noise()
