# This project was developed with assistance from AI tools.
"""Request and response schemas for the BrokerGPT API."""
