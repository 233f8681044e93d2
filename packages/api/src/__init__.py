# This project was developed with assistance from AI tools.
"""BrokerGPT API."""

__version__ = "0.1.0"
