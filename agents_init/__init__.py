"""agents-init -- interactive initializer for the AI agent documentation framework."""

__version__ = "0.1.0"
