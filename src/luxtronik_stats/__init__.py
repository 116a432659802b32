"""Collect Luxtronik heat pump calculations and store them in InfluxDB."""

__version__ = "0.1.0"
