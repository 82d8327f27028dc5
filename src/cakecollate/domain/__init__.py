"""Domain layer — order field value objects and list indices.

This layer depends only on stdlib and pydantic.
It must never import from parser, services, commands, or config.
"""
