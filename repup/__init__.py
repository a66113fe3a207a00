"""RepUp: workout, exercise and body part records behind a small REST API."""

__version__ = "0.1.0"
