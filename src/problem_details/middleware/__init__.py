# This project was developed with assistance from AI tools.
"""ASGI middleware."""
