"""Concrete adapters for the interfaces in ``moviemonster.interfaces``."""
