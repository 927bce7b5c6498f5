"""cli-app: a small subcommand CLI."""

from importlib.metadata import PackageNotFoundError, version

from .constants import DISTRIBUTION_NAME, UNKNOWN_VERSION

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Running from a source tree that was never installed.
    __version__ = UNKNOWN_VERSION

__all__ = ["__version__"]
