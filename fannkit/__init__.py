"""Feed-forward neural networks: building, running, inspecting and saving them."""

__version__ = "2.3.0"