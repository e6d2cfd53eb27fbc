"""A top-down farming sandbox with a lunar calendar, seasons and a day/night cycle."""

__version__ = "0.1.0"