"""Solutions to classic competitive-programming problems, with a command-line front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]