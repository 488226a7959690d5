"""GST computation engine for Indian sales invoices."""

__version__ = "0.1.0"
