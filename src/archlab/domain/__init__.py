"""Domain layer: graph model, validation rules, naming, and emission.

This layer depends only on stdlib, pydantic, and the template loader.
It must never import from services, commands, or config.
"""
