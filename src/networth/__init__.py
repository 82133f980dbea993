"""Net worth tracker: multi-currency ledger valuation and FX-rate caching."""

__version__ = "0.1.0"
