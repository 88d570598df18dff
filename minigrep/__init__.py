"""Search files, directory trees or standard input for lines matching a regular expression."""

__version__ = "0.1.0"
__all__ = ["__version__"]