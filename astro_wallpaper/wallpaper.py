"""
Download the resolved image and apply it as the desktop background.

These are the collaborators downstream of resolution; the engine never
imports this module.
"""

import logging
import mimetypes
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

from astro_wallpaper.errors import ResolutionError, WallpaperError
from astro_wallpaper.transport import Transport

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

# SystemParametersInfoW flags
SPI_SETDESKWALLPAPER = 0x0014
SPIF_UPDATEINIFILE = 0x01
SPIF_SENDCHANGE = 0x02

_OSASCRIPT_TEMPLATE = """tell application "System Events"
    set picture of every desktop to "{path}"
end tell"""


def download_image(url: str, transport: Transport, directory: str | Path | None = None) -> Path:
    """
    Download an image to a new file.

    Args:
        url: Resolved image URL
        transport: Transport used for the download
        directory: Target directory (None = system temp dir)

    Returns:
        Path of the written file

    Raises:
        WallpaperError: On transport failure, non-2xx status, or non-image body
    """
    try:
        response = transport.fetch(url)
    except ResolutionError as e:
        raise WallpaperError(f"Download error: {e}") from e

    if not response.ok:
        raise WallpaperError(f"Download error: HTTP {response.status}")
    if not response.content_type.startswith("image/"):
        raise WallpaperError(
            f"Download error: expected an image, got {response.content_type or 'no content type'}"
        )

    suffix = _EXTENSIONS.get(response.content_type) or mimetypes.guess_extension(response.content_type) or ".img"
    if directory is not None:
        Path(directory).mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        prefix="nasa_wallpaper_", suffix=suffix, dir=directory, delete=False
    ) as f:
        f.write(response.body)
        path = Path(f.name)

    logger.info(f"Saved {len(response.body):,} bytes to {path}")
    return path


def _run(cmd: list[str]) -> None:
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except (OSError, subprocess.CalledProcessError) as e:
        stderr = getattr(e, "stderr", "") or ""
        raise WallpaperError(f"Failed to set wallpaper: {e} {stderr.strip()}".strip()) from e


def _applescript_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _set_macos(path: Path) -> None:
    _run(["osascript", "-e", _OSASCRIPT_TEMPLATE.format(path=_applescript_string(str(path)))])


def _set_windows(path: Path) -> None:
    import ctypes

    ok = ctypes.windll.user32.SystemParametersInfoW(  # type: ignore[attr-defined]
        SPI_SETDESKWALLPAPER, 0, str(path), SPIF_UPDATEINIFILE | SPIF_SENDCHANGE
    )
    if not ok:
        raise WallpaperError("Failed to set wallpaper: SystemParametersInfoW returned 0")


def _set_gnome(path: Path) -> None:
    if shutil.which("gsettings") is None:
        raise WallpaperError("Failed to set wallpaper: gsettings not found")
    uri = path.as_uri()
    _run(["gsettings", "set", "org.gnome.desktop.background", "picture-uri", uri])
    # picture-uri-dark only exists on GNOME 42+
    try:
        _run(["gsettings", "set", "org.gnome.desktop.background", "picture-uri-dark", uri])
    except WallpaperError as e:
        logger.debug(f"Skipping dark-mode wallpaper: {e}")


def set_wallpaper(image_path: str | Path, platform: str | None = None) -> None:
    """
    Apply an image file as the desktop background.

    Args:
        image_path: Downloaded image
        platform: sys.platform value to dispatch on (defaults to the running OS)

    Raises:
        WallpaperError: If the OS is unsupported or the OS call fails
    """
    platform = platform or sys.platform
    path = Path(image_path).resolve()
    logger.info(f"Setting wallpaper on {platform}: {path}")

    if platform == "darwin":
        _set_macos(path)
    elif platform == "win32":
        _set_windows(path)
    elif platform.startswith("linux"):
        _set_gnome(path)
    else:
        raise WallpaperError(f"unsupported OS: {platform}")
