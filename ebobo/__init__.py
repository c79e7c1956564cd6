"""An emoji arena game: wire types, SQLite storage, authentication, matchmaking and an API client."""

__version__ = "0.1.0"