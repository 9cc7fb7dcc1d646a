"""Cat breed catalog: local store, query engine, favorites and personality quiz."""

__version__ = "0.1.0"
