"""Annual solar energy estimates from polyharmonic interpolation over sun directions."""

__version__ = "0.1.0"