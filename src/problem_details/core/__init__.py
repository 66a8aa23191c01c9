# This project was developed with assistance from AI tools.
"""Configuration and fixed tables shared by every request."""
