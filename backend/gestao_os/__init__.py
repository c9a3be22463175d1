"""Backend for service-order management of a uniform shop."""

__version__ = "0.1.0"
