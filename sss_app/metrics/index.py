"""GBCE all-share index calculation"""

import math
from collections.abc import Iterable


def calculate_geometric_index(prices: Iterable[float]) -> float:
    """
    Geometric mean of all instrument prices.

    Prices that are not positive are left out of the product but still
    count towards N, which is the same as treating them as 1.

    Args:
        prices: Current price of every listed instrument

    Returns:
        N-th root of the product, 0.0 for an empty price list
    """
    prices = list(prices)
    if not prices:
        return 0.0

    product = math.prod(price for price in prices if price > 0)

    return math.pow(product, 1.0 / len(prices))
