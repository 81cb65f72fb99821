"""Core page types and the default renderer."""
