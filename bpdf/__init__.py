"""Properties, geometry, metrics, documents and image caching for grid-based PDF layouts."""

__version__ = "0.1.0"