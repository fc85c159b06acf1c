"""
Trade ledger module.

Holds the single append-only history of trades shared by every
instrument, together with the validation applied before a trade is
recorded.
"""
