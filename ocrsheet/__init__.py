"""ocrsheet package initializer.

This package turns OCR recognition results into spreadsheet grids and
exports those grids as CSV.

The package exposes a ``__version__`` attribute indicating the installed
version of ocrsheet, read from the package metadata via importlib.metadata.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ocrsheet")
except PackageNotFoundError:
    # Package is not installed (running from source without pip install -e .)
    __version__ = "0.0.0.dev"

__all__: list[str] = ["__version__"]
