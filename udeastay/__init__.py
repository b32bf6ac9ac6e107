"""Lodging marketplace: dates, lodgings, reservations, users and console menus."""

__version__ = "0.1.0"
__all__ = ["alojamiento", "fecha", "menu", "reservacion", "usuarios"]