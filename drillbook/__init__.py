"""Exercise loading, compilation, completion checks and worked lesson solutions."""

__version__ = "5.2.1"