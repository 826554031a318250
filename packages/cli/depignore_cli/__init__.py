"""depignore CLI - inspect ignore rules and their effect on requirements."""

__version__ = "0.1.0"
