"""Default configuration parameters for the reference market."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InstrumentSeed:
    """Static definition of one listed stock."""
    symbol: str
    stock_class: str                      # "common" or "preferred"
    last_dividend: float
    par_value: float
    fixed_dividend_rate: float = 0.0      # Percentage, preferred only


DEFAULT_INSTRUMENTS: tuple[InstrumentSeed, ...] = (
    InstrumentSeed("TEA", "common", 0.00, 1.00),
    InstrumentSeed("POP", "common", 0.08, 1.00),
    InstrumentSeed("ALE", "common", 0.23, 0.60),
    InstrumentSeed("GIN", "preferred", 0.08, 1.00, fixed_dividend_rate=2.0),
    InstrumentSeed("JOE", "common", 0.13, 2.50),
)


@dataclass(frozen=True)
class PricingParams:
    """Trailing price parameters."""
    window_seconds: float = 15 * 60       # Trades younger than this set the price


@dataclass(frozen=True)
class SimulationParams:
    """Random demo trade parameters."""
    min_quantity: int = 1
    max_quantity: int = 109
    base_price: float = 0.41              # Lowest generated price
    price_steps: int = 299                # Number of 0.01 increments above base
    price_tick: float = 0.01


@dataclass(frozen=True)
class DisplayParams:
    """Console output parameters."""
    price_precision: int = 2
    index_precision: int = 4


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    pricing: PricingParams
    simulation: SimulationParams
    display: DisplayParams
    instruments: tuple[InstrumentSeed, ...] = field(default=DEFAULT_INSTRUMENTS)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        pricing=PricingParams(),
        simulation=SimulationParams(),
        display=DisplayParams(),
    )
