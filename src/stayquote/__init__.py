"""Quote and pricing engine for tourism property and tour bookings."""

__version__ = "0.1.0"
