"""Building blocks for an LED matrix clock: bitmap fonts, date strings, an
HC-SR04 sensor model, and JSON buffer, printer and reader helpers."""

__version__ = "0.1.0"