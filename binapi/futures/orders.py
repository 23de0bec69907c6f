"""Futures order types and the query parameters that describe an order."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from binapi.util import build_signed_request


class ContractType(str, Enum):
    PERPETUAL = "PERPETUAL"
    CURRENT_MONTH = "CURRENT_MONTH"
    NEXT_MONTH = "NEXT_MONTH"
    CURRENT_QUARTER = "CURRENT_QUARTER"
    NEXT_QUARTER = "NEXT_QUARTER"


class PositionSide(str, Enum):
    BOTH = "BOTH"
    LONG = "LONG"
    SHORT = "SHORT"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP = "STOP"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
    TRAILING_STOP_MARKET = "TRAILING_STOP_MARKET"


class WorkingType(str, Enum):
    MARK_PRICE = "MARK_PRICE"
    CONTRACT_PRICE = "CONTRACT_PRICE"


Number = Union[int, float]


@dataclass
class CustomOrderRequest:
    """Every field a futures order may carry; unset optional fields are omitted.

    ``side`` and ``time_in_force`` take the exchange's wire names (``"BUY"``,
    ``"GTC"``, ...) or an enum whose value is such a name.
    """

    symbol: str
    side: Any
    order_type: OrderType
    position_side: Optional[PositionSide] = None
    time_in_force: Any = None
    qty: Optional[Number] = None
    reduce_only: Optional[bool] = None
    price: Optional[Number] = None
    stop_price: Optional[Number] = None
    close_position: Optional[bool] = None
    activation_price: Optional[Number] = None
    callback_rate: Optional[Number] = None
    working_type: Optional[WorkingType] = None
    price_protect: Optional[Number] = None


def _wire(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _format_float(value: Number) -> str:
    """Format a number the way the exchange expects: shortest digits, no exponent."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return format(Decimal(repr(number)).normalize(), "f")


def _format_bool(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def build_order(order: CustomOrderRequest) -> dict[str, str]:
    """Return the query parameters describing ``order``."""
    parameters = {
        "symbol": order.symbol,
        "side": _wire(order.side),
        "type": _wire(order.order_type),
    }
    if order.position_side is not None:
        parameters["positionSide"] = _wire(order.position_side)
    if order.time_in_force is not None:
        parameters["timeInForce"] = _wire(order.time_in_force)
    if order.qty is not None:
        parameters["quantity"] = _format_float(order.qty)
    if order.reduce_only is not None:
        parameters["reduceOnly"] = _format_bool(order.reduce_only)
    if order.price is not None:
        parameters["price"] = _format_float(order.price)
    if order.stop_price is not None:
        parameters["stopPrice"] = _format_float(order.stop_price)
    if order.close_position is not None:
        parameters["closePosition"] = _format_bool(order.close_position)
    if order.activation_price is not None:
        parameters["activationPrice"] = _format_float(order.activation_price)
    if order.callback_rate is not None:
        parameters["callbackRate"] = _format_float(order.callback_rate)
    if order.working_type is not None:
        parameters["workingType"] = _wire(order.working_type)
    if order.price_protect is not None:
        parameters["priceProtect"] = _format_float(order.price_protect).upper()
    return parameters


def limit_order(
    symbol: str, side: Any, qty: Number, price: Number, time_in_force: Any
) -> CustomOrderRequest:
    """A LIMIT order at ``price``."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.LIMIT,
        time_in_force=time_in_force,
        qty=float(qty),
        price=float(price),
    )


def market_order(symbol: str, side: Any, qty: Number) -> CustomOrderRequest:
    """A MARKET order for ``qty``."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.MARKET,
        qty=float(qty),
    )


def stop_market_close_order(symbol: str, side: Any, stop_price: Number) -> CustomOrderRequest:
    """A STOP_MARKET order that closes the whole position at ``stop_price``."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.STOP_MARKET,
        stop_price=float(stop_price),
        close_position=True,
    )


def signed_order_query(order: CustomOrderRequest, recv_window: int) -> str:
    """The timestamped query string for placing ``order``."""
    return build_signed_request(build_order(order), recv_window)