"""In-N-Out Books catalog and authentication API."""

__version__ = "0.1.0"
