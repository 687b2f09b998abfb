"""Sort or tally numbers, words or lines and print a report."""

__version__ = "0.1.0"
