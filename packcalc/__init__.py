"""Work out which packs to ship for an order, with an HTTP service around it."""

__version__ = "0.1.0"