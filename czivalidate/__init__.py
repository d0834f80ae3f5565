"""Building blocks for validating CZI microscopy documents: check catalogue, option parsing and console output."""

__version__ = "0.6.5"