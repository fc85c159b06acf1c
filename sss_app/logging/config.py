"""
Logging setup for the reference market.

structlog renders every event; the stdlib root handler only carries the
rendered line to the chosen stream. Modules take their loggers from here so
the ledger and pricing events share one field vocabulary.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor

# Shared by both renderers, always first in the chain.
BASE_PROCESSORS: tuple[Processor, ...] = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)

CALLSITE_FIELDS = (
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.LINENO,
)


def resolve_level(level: "str | int") -> int:
    """
    Numeric stdlib level for a name such as "warning" or an int.

    Raises:
        ValueError: If the name is not a stdlib level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def build_processors(
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
) -> list[Processor]:
    """Processor chain up to, but not including, the renderer."""
    chain = list(BASE_PROCESSORS)
    if include_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    if include_caller:
        chain.append(structlog.processors.CallsiteParameterAdder(parameters=list(CALLSITE_FIELDS)))
    chain.extend(extra_processors or ())
    return chain


def select_renderer(format_json: bool) -> Processor:
    if format_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: "str | int" = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Route structlog events through the stdlib root logger.

    Args:
        level: Level name or number
        format_json: One JSON object per line instead of console text
        include_timestamp: Add an ISO-8601 UTC ``timestamp`` field
        include_caller: Add ``filename`` and ``lineno`` of the call site
        extra_processors: Run after the built-in processors, before rendering
        stream: Destination, stderr when omitted
    """
    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = build_processors(include_timestamp, include_caller, extra_processors)
    processors.append(select_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> FilteringBoundLogger:
    """Logger for a module, bound lazily so later configuration applies."""
    return structlog.get_logger(name, **initial_values)


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for trade ledger events.

    Bound with the ledger subsystem and flagged as audit trail.
    """
    return get_logger(name, subsystem="ledger", audit_trail=True)


def get_pricing_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for price recomputation events."""
    return get_logger(name, subsystem="pricing")


def log_trade_recorded(
    logger: FilteringBoundLogger,
    symbol: str,
    side: str,
    quantity: int,
    price: float,
    ledger_size: int,
) -> None:
    """
    Log an accepted trade with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Traded instrument
        side: "buy" or "sell"
        quantity: Number of shares
        price: Price per share
        ledger_size: Ledger length after the append
    """
    logger.info(
        "Trade recorded",
        symbol=symbol,
        side=side,
        quantity=quantity,
        price=price,
        ledger_size=ledger_size,
    )


def log_price_update(
    logger: FilteringBoundLogger,
    symbol: str,
    old_price: float,
    new_price: float,
    trade_count: int,
    window_seconds: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a trailing price recomputation with standardized format.

    A recomputation with no trades in the window is logged at debug level.
    """
    bound_logger = logger.bind(
        symbol=symbol,
        old_price=old_price,
        new_price=new_price,
        trade_count=trade_count,
        window_seconds=window_seconds,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if trade_count:
        bound_logger.info("Price recomputed")
    else:
        bound_logger.debug("No trades in window, price unchanged")
