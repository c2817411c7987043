"""garnet-launcher: install and start the GarnetAI event generator."""

__version__ = "0.1.0"
