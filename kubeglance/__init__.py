"""Building blocks for a terminal Kubernetes dashboard: keys, events, themes, titles and settings."""

__version__ = "0.1.0"