"""Air hockey and territory games for an augmented climbing wall, with a menu-client server link."""

__version__ = "0.1.0"