"""A minimal command shell with environment built-ins, PATH lookup and a small printf."""

__version__ = "0.1.0"
__all__ = ["__version__"]