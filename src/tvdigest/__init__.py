"""tvdigest - weekly digest of tracked TV series."""

__version__ = "0.1.0"
