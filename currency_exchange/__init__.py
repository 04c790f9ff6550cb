"""Currency exchange agent: priced FX entrypoints over the Frankfurter API."""

__version__ = "1.0.0"
