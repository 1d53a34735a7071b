"""Periodic website health checks delivered as an emailed report."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("uptime-reporter")
except PackageNotFoundError:
    # Running from a source checkout that was never installed.
    __version__ = "0.0.0"
