"""Product model, service layer, MongoDB configuration and JSON handlers for a sporting goods catalogue."""

__version__ = "1.0.0"