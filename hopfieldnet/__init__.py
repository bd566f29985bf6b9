"""Hopfield network that learns black-and-white images and restores noisy ones."""

__version__ = "0.1.0"