"""Building blocks for Photoshop (.psd) data: PackBits, channel encoding and pixel layout helpers."""

__version__ = "0.1.0"