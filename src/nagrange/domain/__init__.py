"""Domain layer: the range value type, its parser, and parse errors.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
