"""Building blocks of a small game about a besieged bunker and its telegraph wire."""

__version__ = "0.1.0"