"""WordLens — document-to-text normalization and highlighted-word tables."""

__version__ = "0.1.0"
