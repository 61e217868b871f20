"""moviemonster: caching HTTP gateway for TMDb movie metadata and posters."""

__version__ = "0.1.0"
