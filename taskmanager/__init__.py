"""Interactive shell and YAML configuration reader for managed services."""

__version__ = "0.1.0"

__all__ = ["commands", "config", "controller", "service"]