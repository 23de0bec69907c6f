"""Query-string builders, response and event models, and websocket stream clients for Binance spot and futures APIs."""

__version__ = "0.1.0"