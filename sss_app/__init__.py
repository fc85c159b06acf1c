"""
Super Simple Stocks - GBCE Reference Market

An in-memory stock market reference tool. Maintains a fixed set of
instruments, records buy/sell trades against them and derives dividend
yield, P/E ratio, trailing trade price and the GBCE all-share index.
"""

__version__ = "0.1.0"
__author__ = "SSS Team"
