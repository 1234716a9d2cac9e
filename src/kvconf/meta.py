"""Package metadata for kvconf."""

__app_name__ = "kvconf"
__version__ = "1.0.0"
__author__ = "kvconf contributors"
__description__ = "Line-oriented key/value configuration reader with typed accessors."

__all__ = ["__app_name__", "__author__", "__description__", "__version__"]
