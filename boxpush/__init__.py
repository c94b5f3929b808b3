"""Warehouse robot box-pushing simulation with narrow and wide boxes."""

__version__ = "0.1.0"
__all__ = ["reader", "part1", "part2"]