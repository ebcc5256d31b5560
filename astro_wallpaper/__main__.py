"""Entry point for `python -m astro_wallpaper`."""

from astro_wallpaper.cli import app

if __name__ == "__main__":
    app()
