"""lconvert — convert text typed on one keyboard layout into another."""

__version__ = "1.0.0"
