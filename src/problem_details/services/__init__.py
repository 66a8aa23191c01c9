# This project was developed with assistance from AI tools.
"""Document creation and route admission."""
