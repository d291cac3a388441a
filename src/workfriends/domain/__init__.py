"""Domain layer — address rules, membership classification, and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
