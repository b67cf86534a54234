"""Build and parse GB/T 28181 MANSCDP XML message bodies."""

__version__ = "0.1.0"