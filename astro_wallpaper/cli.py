"""
CLI interface for astro-wallpaper.

Thin presentation layer over the providers/ engine. The resolved URL is the
only thing written to stdout; status and errors go to stderr.
"""

import random
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from astro_wallpaper.config.loader import get_config_path, load_config
from astro_wallpaper.config.schema import AstroWallpaperConfig
from astro_wallpaper.errors import ResolutionError, UnknownProviderError, WallpaperError
from astro_wallpaper.logging_config import configure_logging, redact_api_key
from astro_wallpaper.models import ResolvedImage
from astro_wallpaper.providers import ProviderSelector, create_providers, create_selector
from astro_wallpaper.transport import HttpxTransport, Transport
from astro_wallpaper.wallpaper import download_image, set_wallpaper

app = typer.Typer(
    name="astro-wallpaper",
    help="Random NASA astronomy images as desktop wallpaper.",
    no_args_is_help=True,
)

_PROVIDER_HELP = "Use this provider instead of a random one (mars, earth, epic)"
_SEED_HELP = "Seed the random source for a reproducible pick"
_CONFIG_HELP = "Config file (defaults to the platform config dir)"


def _console():
    from rich.console import Console

    return Console(stderr=True)


def _fail(message: str, code: int = 1) -> typer.Exit:
    from rich.markup import escape

    _console().print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code)


def _setup(config_file: str | None, verbose: bool) -> AstroWallpaperConfig:
    """Load config and configure stderr logging."""
    try:
        config = load_config(Path(config_file) if config_file else None)
    except (ValueError, ValidationError, yaml.YAMLError) as e:
        raise _fail(f"Invalid config: {e}")
    verbosity = "verbose" if verbose else config.output.verbosity
    configure_logging(verbosity, config.output.log_format)
    return config


def _make_transport(config: AstroWallpaperConfig) -> HttpxTransport:
    return HttpxTransport(
        timeout=config.http.timeout,
        max_attempts=config.http.max_attempts,
        backoff_min=config.http.backoff_min,
        backoff_max=config.http.backoff_max,
    )


def _resolve(
    config: AstroWallpaperConfig,
    transport: Transport,
    provider: str | None,
    seed: int | None,
) -> ResolvedImage:
    """Resolve one image with a live spinner on stderr."""
    from rich.status import Status

    selector: ProviderSelector = create_selector(config, transport, random.Random(seed))
    with Status("[dim]Looking for an image...[/dim]", console=_console(), spinner="dots"):
        if provider:
            return selector.resolve_with(provider)
        return selector.resolve_random_image()


@app.command()
def resolve(
    provider: str = typer.Option(None, "--provider", "-p", help=_PROVIDER_HELP),
    seed: int = typer.Option(None, "--seed", help=_SEED_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Resolve a random NASA image and print its URL."""
    config = _setup(config_file, verbose)

    try:
        with _make_transport(config) as transport:
            image = _resolve(config, transport, provider, seed)
    except UnknownProviderError as e:
        raise _fail(str(e), code=2)
    except ResolutionError as e:
        raise _fail(str(e))

    typer.echo(image.url)


@app.command()
def apply(
    provider: str = typer.Option(None, "--provider", "-p", help=_PROVIDER_HELP),
    seed: int = typer.Option(None, "--seed", help=_SEED_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    no_set: bool = typer.Option(False, "--no-set", help="Download only, don't change the wallpaper"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Resolve a random NASA image, download it, and set it as the wallpaper."""
    from rich.markup import escape

    config = _setup(config_file, verbose)
    console = _console()

    try:
        with _make_transport(config) as transport:
            image = _resolve(config, transport, provider, seed)
            console.print(f"[dim]Downloading from:[/dim] {escape(redact_api_key(image.url))}")
            path = download_image(image.url, transport, config.output.download_dir)
    except UnknownProviderError as e:
        raise _fail(str(e), code=2)
    except (ResolutionError, WallpaperError) as e:
        raise _fail(str(e))

    typer.echo(str(path))
    if no_set:
        return

    try:
        set_wallpaper(path)
    except WallpaperError as e:
        raise _fail(str(e))
    console.print(f"[green]✓ Wallpaper set[/green]  ({image.provider})")


@app.command("providers")
def list_providers(
    config_file: str = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """List the providers eligible for random selection."""
    config = _setup(config_file, False)

    with _make_transport(config) as transport:
        providers = create_providers(config, transport, random.Random())

    typer.echo(f"{'NAME':<8} {'RETRIES':<24} DESCRIPTION")
    typer.echo("-" * 72)
    for p in providers:
        typer.echo(f"{p.name:<8} {p.retry_summary():<24} {p.description}")


@app.command("config-path")
def config_path():
    """Print the config file location."""
    typer.echo(str(get_config_path()))


if __name__ == "__main__":
    app()
