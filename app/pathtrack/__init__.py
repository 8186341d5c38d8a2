"""pathtrack - Track filesystem paths and export the files they contain."""

__version__ = "0.1.0"
