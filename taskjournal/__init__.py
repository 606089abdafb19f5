"""A small command-line journal that keeps its entries in one JSON file."""

__version__ = "0.1.0"
