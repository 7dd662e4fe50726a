"""Domain layer — remote parsing, rule matching, link markup.

This layer depends only on stdlib and the config models.
It must never import from services, infrastructure, commands, or output.
"""
