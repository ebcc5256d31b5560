"""Random NASA astronomy wallpapers: resolve one image URL per run."""

__version__ = "0.1.0"
