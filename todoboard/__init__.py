"""A to-do board that keeps categorised tasks in an SQLite file, with a command line."""

__version__ = "0.1.0"