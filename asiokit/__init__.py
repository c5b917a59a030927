"""RFC 4122 UUID parsing and generation, and a configurable application logger."""

__version__ = "1.0.0"
__all__ = ["uuids", "uuid_tools", "logconfig", "logger"]