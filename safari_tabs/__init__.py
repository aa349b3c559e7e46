"""Activate, list and close Safari windows and tabs from the command line."""

from .__version__ import __version__

__all__ = ["__version__"]
