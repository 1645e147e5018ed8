"""Music catalog community backend: catalog, ratings, comments, likes and notifications."""

__version__ = "1.0.0"
