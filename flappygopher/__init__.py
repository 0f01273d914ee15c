"""A side-scrolling arcade game about a gopher flying between pipes."""

__version__ = "0.1.0"