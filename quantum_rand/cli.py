"""CLI for quantum-rand."""

from __future__ import annotations

import functools
import sys

import click

from quantum_rand import __version__
from quantum_rand.clock import ALL_CLOCKS, DEFAULT_CLOCK
from quantum_rand.core import WIDTHS
from quantum_rand.errors import QRNGError


@click.group()
@click.version_option(__version__)
def main() -> None:
    """quantum-rand: random numbers from clock jitter."""


def _rng_options(fn):
    """Clock selection and polling budget shared by every generating command."""

    @click.option("--clock", "clock_name", type=click.Choice(sorted(ALL_CLOCKS)),
                  default=DEFAULT_CLOCK, envvar="QRNG_CLOCK", show_default=True,
                  help="Clock to poll for jitter.")
    @click.option("--max-polls", type=click.IntRange(min=1), default=None,
                  envvar="QRNG_MAX_POLLS",
                  help="Fail if the clock stays unchanged for this many reads (default: no limit).")
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except QRNGError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper


# ────────────────────────────────────────────────────────────
# Discovery
# ────────────────────────────────────────────────────────────


@main.command()
def scan() -> None:
    """List the clocks readable on this machine."""
    from quantum_rand.platform import detect_available_clocks, platform_info

    info = platform_info()
    click.echo(f"Platform: {info['system']} {info['machine']} ({info['interpreter']} {info['python']})")
    click.echo()

    clocks = detect_available_clocks()
    click.echo(f"Found {len(clocks)} available clock(s):\n")
    for clk in clocks:
        ci = clk.info()
        default = " (default)" if clk.name == DEFAULT_CLOCK else ""
        click.echo(
            f"  {clk.name:<14} {ci['implementation']:<32} "
            f"resolution={ci['resolution']:.1e}s{default}"
        )
    if not clocks:
        click.echo("  (none found)")


# ────────────────────────────────────────────────────────────
# Integers
# ────────────────────────────────────────────────────────────


@main.command("int")
@click.option("--width", type=click.Choice([str(w) for w in WIDTHS]), default="32",
              show_default=True, help="Bit width.")
@click.option("--signed", "is_signed", is_flag=True, help="Two's-complement output.")
@click.option("--count", default=1, type=click.IntRange(min=0), show_default=True,
              help="How many integers to print.")
@_rng_options
def int_(width: str, is_signed: bool, count: int, clock_name: str, max_polls: int | None) -> None:
    """Print random integers, one per line."""
    rng = _make_rng(clock_name, max_polls)
    bits = int(width)
    draw = rng.signed if is_signed else rng.unsigned
    for _ in range(count):
        click.echo(draw(bits))


# ────────────────────────────────────────────────────────────
# Stream: continuous bytes to stdout
# ────────────────────────────────────────────────────────────


@main.command()
@click.option("--format", "fmt", type=click.Choice(["raw", "hex", "base64"]), default="raw",
              help="Output format.")
@click.option("--bytes", "n_bytes", default=0, type=click.IntRange(min=0),
              help="Total bytes (0 = infinite).")
@_rng_options
def stream(fmt: str, n_bytes: int, clock_name: str, max_polls: int | None) -> None:
    """Stream random bytes to stdout.

    Examples:

        quantum-rand stream --format hex --bytes 64

        quantum-rand stream --format raw | head -c 1024 > /tmp/jitter.bin
    """
    import base64

    rng = _make_rng(clock_name, max_polls)
    chunk_size = 64
    total = 0
    out = click.get_binary_stream("stdout")

    try:
        while True:
            if 0 < n_bytes <= total:
                break
            want = chunk_size if n_bytes == 0 else min(chunk_size, n_bytes - total)
            data = rng.bytes(want)

            if fmt == "raw":
                out.write(data)
                out.flush()
            elif fmt == "hex":
                click.echo(data.hex(), nl=False)
            elif fmt == "base64":
                click.echo(base64.b64encode(data).decode(), nl=False)

            total += len(data)
    except (BrokenPipeError, KeyboardInterrupt):
        pass


# ────────────────────────────────────────────────────────────
# Image: one u8 per grayscale pixel
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("path", default="random.png", type=click.Path(dir_okay=False, writable=True))
@click.option("--width", default=512, type=click.IntRange(min=1), show_default=True)
@click.option("--height", default=512, type=click.IntRange(min=1), show_default=True)
@_rng_options
def image(path: str, width: int, height: int, clock_name: str, max_polls: int | None) -> None:
    """Write a grayscale image whose pixels are random bytes."""
    try:
        from PIL import Image
    except ImportError:
        click.echo("Error: writing images needs Pillow (pip install 'quantum-rand[image]').",
                   err=True)
        sys.exit(1)

    from quantum_rand.numpy_compat import QRNGBitGenerator

    bg = QRNGBitGenerator(_make_rng(clock_name, max_polls))
    pixels = bg.integers(8, size=(height, width))
    Image.fromarray(pixels).save(path)
    click.echo(f"Wrote {width}x{height} image to {path}")


# ────────────────────────────────────────────────────────────
# Helpers
# ────────────────────────────────────────────────────────────


def _make_rng(clock_name: str, max_polls: int | None = None):
    """Build a QRNG polling the named clock."""
    from quantum_rand.clock import get_clock
    from quantum_rand.core import QRNG

    return QRNG(clock=get_clock(clock_name), max_polls=max_polls)
