"""Load 24-bit BMP images, apply grayscale, negative, crop, sharpening and edge filters, and save them."""

__version__ = "0.1.0"