"""Terminal playlist manager with ID search, rating tree, sorting, play history and artist blocklist."""

__version__ = "0.1.0"