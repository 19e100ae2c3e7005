"""
Image Resizing CLI Commands for PyFastResize

Command line interface for resizing and sharpening image files.

Author: B.G.
"""

import logging
import sys

import click

import pyfastresize as pfr

QUALITY_NAMES = [variant.name.lower() for variant in pfr.filters.FilterVariant]


def _parse_quality(value):
    if value.isdigit():
        return int(value)
    return value


def _enable_verbose_logging():
    logging.basicConfig(format="%(name)s: %(message)s")
    logging.getLogger("pyfastresize").setLevel(logging.DEBUG)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option("--width", "-W", type=int, default=None, help="Target width in pixels")
@click.option("--height", "-H", type=int, default=None, help="Target height in pixels")
@click.option(
    "--max-dim",
    type=int,
    default=None,
    help="Fit the longer side to this many pixels, keeping the aspect ratio",
)
@click.option(
    "--quality",
    "-q",
    default="lanczos3",
    show_default=True,
    help=f"Filter: 0-4 or one of {', '.join(QUALITY_NAMES)}",
)
@click.option("--opaque", is_flag=True, help="Force output alpha to 255")
@click.option(
    "--unsharp-amount",
    default=0.0,
    show_default=True,
    type=float,
    help="Unsharp mask amount in percent (0 disables sharpening)",
)
@click.option(
    "--unsharp-radius",
    default=0.6,
    show_default=True,
    type=float,
    help="Unsharp mask radius in pixels (0.5-2.0)",
)
@click.option(
    "--unsharp-threshold",
    default=2,
    show_default=True,
    type=click.IntRange(0, 255),
    help="Unsharp mask threshold (0-255)",
)
@click.option(
    "--backend",
    "-b",
    type=click.Choice(pfr.backends.available_backends()),
    default="reference",
    show_default=True,
    help="Convolution backend",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def resize_image(
    input_image,
    output_image,
    width,
    height,
    max_dim,
    quality,
    opaque,
    unsharp_amount,
    unsharp_radius,
    unsharp_threshold,
    backend,
    verbose,
):
    """
    Resize INPUT_IMAGE and save it to OUTPUT_IMAGE.

    Give --width and/or --height (a missing side keeps the aspect ratio),
    or --max-dim.

    Examples:

        # Thumbnail with the longer side at 256 px
        pfr-resize photo.jpg thumb.png --max-dim 256

        # Exact size, hamming filter, light sharpening
        pfr-resize in.png out.png -W 320 -H 200 -q hamming --unsharp-amount 80
    """
    try:
        if verbose:
            _enable_verbose_logging()
            click.echo(f"Loading image from '{input_image}'...")

        image = pfr.misc.load_rgba(input_image)
        src_h, src_w = image.shape[:2]

        if max_dim is not None:
            if width is not None or height is not None:
                raise click.UsageError("--max-dim cannot be combined with --width/--height")
            target_w, target_h = pfr.resample.resize_to_max_dim(
                src_w, src_h, max_dim, upscale=True
            )
        elif width is not None and height is not None:
            target_w, target_h = width, height
        elif width is not None or height is not None:
            target_w, target_h = pfr.resample.fit_within(
                src_w, src_h, width, height, upscale=True
            )
        else:
            raise click.UsageError("Give --width, --height or --max-dim")

        if verbose:
            click.echo(f"Resizing {src_w}x{src_h} -> {target_w}x{target_h} ({quality})...")

        result = pfr.resize_image(
            image,
            target_w,
            target_h,
            quality=_parse_quality(quality),
            opaque=opaque,
            backend=backend,
        )

        if unsharp_amount != 0:
            if verbose:
                click.echo(
                    f"Sharpening (amount={unsharp_amount}, radius={unsharp_radius}, "
                    f"threshold={unsharp_threshold})..."
                )
            pfr.unsharp_image(result, unsharp_amount, unsharp_radius, unsharp_threshold)

        pfr.misc.save_rgba(output_image, result)

        if verbose:
            click.echo("Resize completed successfully!")
        else:
            click.echo(f"Resized '{input_image}' -> '{output_image}' ({target_w}x{target_h})")

    except click.UsageError:
        raise

    except ImportError as e:
        click.echo(f"Error: Missing dependency - {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option(
    "--amount", "-a", default=80.0, show_default=True, type=float, help="Amount in percent"
)
@click.option(
    "--radius", "-r", default=0.6, show_default=True, type=float, help="Radius in pixels"
)
@click.option(
    "--threshold",
    "-t",
    default=2,
    show_default=True,
    type=click.IntRange(0, 255),
    help="Threshold (0-255)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def unsharp_image(input_image, output_image, amount, radius, threshold, verbose):
    """
    Sharpen the brightness of INPUT_IMAGE and save it to OUTPUT_IMAGE.

    Examples:

        pfr-unsharp in.png out.png --amount 120 --radius 1.0 --threshold 4
    """
    try:
        if verbose:
            _enable_verbose_logging()
            click.echo(f"Loading image from '{input_image}'...")

        image = pfr.misc.load_rgba(input_image)
        pfr.unsharp_image(image, amount, radius, threshold)
        pfr.misc.save_rgba(output_image, image)

        if verbose:
            click.echo("Sharpening completed successfully!")
        else:
            click.echo(f"Sharpened '{input_image}' -> '{output_image}'")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["resize_image", "unsharp_image"]
