"""Top-level package for coloursum.

Colourises the digests in checksum utility output so that differences
between hashes stand out.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("coloursum")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
