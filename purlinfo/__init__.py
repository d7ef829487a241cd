"""purlinfo - package metadata lookup by package URL."""

__version__ = "0.1.0"
