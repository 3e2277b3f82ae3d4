"""A drum pad toy with a jiggling square, plus a ctags header-list helper."""

__version__ = "0.1.0"
__all__ = ["__version__"]