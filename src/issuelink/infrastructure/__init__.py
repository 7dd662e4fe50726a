"""Infrastructure layer — git subprocess access.

It must never import from domain, services, commands, or output.
"""
