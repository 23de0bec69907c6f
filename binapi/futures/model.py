"""Data models for futures REST responses and user-data events."""

from __future__ import annotations

from typing import Optional

from binapi.model import (
    Asks,
    Bids,
    Filter,
    KlineSummary,
    RateLimit,
    ServerTime,
    SymbolPrice,
    Tickers,
    _bool,
    _field,
    _float,
    _i64,
    _integer,
    _list,
    _model,
    _nested,
    _optional,
    _str,
    _u8,
    _u16,
    _u64,
    parse_filter,
    parse_string_or_bool,
)

__all__ = [
    "AccountBalance",
    "AggTrade",
    "Asks",
    "Bids",
    "CanceledOrder",
    "ChangeLeverageResponse",
    "ExchangeInformation",
    "KlineSummary",
    "LiquidationOrder",
    "MarkPrice",
    "OpenInterest",
    "OpenInterestHist",
    "Order",
    "OrderBook",
    "OrderTradeEvent",
    "OrderUpdate",
    "Position",
    "PriceStats",
    "RateLimit",
    "ServerTime",
    "Symbol",
    "SymbolPrice",
    "Tickers",
    "Trade",
    "Transaction",
]

_i32 = _integer(-(2**31), 2**31 - 1)


@_model
class Symbol:
    symbol: str = _field(_str)
    status: str = _field(_str)
    maint_margin_percent: str = _field(_str)
    required_margin_percent: str = _field(_str)
    base_asset: str = _field(_str)
    quote_asset: str = _field(_str)
    price_precision: int = _field(_u16)
    quantity_precision: int = _field(_u16)
    base_asset_precision: int = _field(_u64)
    quote_precision: int = _field(_u64)
    filters: list[Filter] = _field(_list(parse_filter))
    order_types: list[str] = _field(_list(_str))
    time_in_force: list[str] = _field(_list(_str))


@_model
class ExchangeInformation:
    timezone: str = _field(_str)
    server_time: int = _field(_u64)
    rate_limits: list[RateLimit] = _field(_list(_nested(RateLimit)))
    exchange_filters: list[str] = _field(_list(_str))
    symbols: list[Symbol] = _field(_list(_nested(Symbol)))


@_model
class OrderBook:
    last_update_id: int = _field(_u64)
    event_time: int = _field(_u64, key="E")
    trade_order_time: int = _field(_u64, key="T")
    bids: list[Bids] = _field(_list(_nested(Bids)))
    asks: list[Asks] = _field(_list(_nested(Asks)))


@_model
class PriceStats:
    symbol: str = _field(_str)
    price_change: str = _field(_str)
    price_change_percent: str = _field(_str)
    weighted_avg_price: str = _field(_str)
    last_price: float = _field(_float)
    open_price: float = _field(_float)
    high_price: float = _field(_float)
    low_price: float = _field(_float)
    volume: float = _field(_float)
    quote_volume: float = _field(_float)
    last_qty: float = _field(_float)
    open_time: int = _field(_u64)
    close_time: int = _field(_u64)
    first_id: int = _field(_u64)
    last_id: int = _field(_u64)
    count: int = _field(_u64)


@_model
class Trade:
    id: int = _field(_u64)
    is_buyer_maker: bool = _field(_bool)
    price: float = _field(_float)
    qty: float = _field(_float)
    quote_qty: float = _field(_float)
    time: int = _field(_u64)


@_model
class AggTrade:
    time: int = _field(_u64, key="T")
    agg_id: int = _field(_u64, key="a")
    first_id: int = _field(_u64, key="f")
    last_id: int = _field(_u64, key="l")
    maker: bool = _field(_bool, key="m")
    price: float = _field(_float, key="p")
    qty: float = _field(_float, key="q")


@_model
class MarkPrice:
    symbol: str = _field(_str)
    mark_price: float = _field(_float)
    last_funding_rate: float = _field(_float)
    next_funding_time: int = _field(_u64)
    time: int = _field(_u64)


@_model
class LiquidationOrder:
    average_price: float = _field(_float)
    executed_qty: float = _field(_float)
    orig_qty: float = _field(_float)
    price: float = _field(_float)
    side: str = _field(_str)
    status: str = _field(_str)
    symbol: str = _field(_str)
    time: int = _field(_u64)
    time_in_force: str = _field(_str)
    type_name: str = _field(_str, key="type")


@_model
class OpenInterest:
    open_interest: float = _field(_float)
    symbol: str = _field(_str)


@_model
class OpenInterestHist:
    symbol: str = _field(_str)
    sum_open_interest: str = _field(_str)
    sum_open_interest_value: str = _field(_str)
    timestamp: int = _field(_u64)


@_model
class Order:
    client_order_id: str = _field(_str)
    cum_qty: float = _field(_float, default=0.0)
    cum_quote: float = _field(_float)
    executed_qty: float = _field(_float)
    order_id: int = _field(_u64)
    avg_price: float = _field(_float)
    orig_qty: float = _field(_float)
    price: float = _field(_float)
    side: str = _field(_str)
    reduce_only: bool = _field(_bool)
    position_side: str = _field(_str)
    status: str = _field(_str)
    stop_price: float = _field(_float, default=0.0)
    close_position: bool = _field(_bool)
    symbol: str = _field(_str)
    time_in_force: str = _field(_str)
    order_type: str = _field(_str, key="type")
    orig_type: str = _field(_str)
    activation_price: float = _field(_float, default=0.0)
    price_rate: float = _field(_float, default=0.0)
    update_time: int = _field(_u64)
    working_type: str = _field(_str)
    price_protect: bool = _field(_bool)


@_model
class Transaction:
    client_order_id: str = _field(_str)
    cum_qty: float = _field(_float)
    cum_quote: float = _field(_float)
    executed_qty: float = _field(_float)
    order_id: int = _field(_u64)
    avg_price: float = _field(_float)
    orig_qty: float = _field(_float)
    reduce_only: bool = _field(_bool)
    side: str = _field(_str)
    position_side: str = _field(_str)
    status: str = _field(_str)
    stop_price: float = _field(_float)
    close_position: bool = _field(_bool)
    symbol: str = _field(_str)
    time_in_force: str = _field(_str)
    type_name: str = _field(_str, key="type")
    orig_type: str = _field(_str)
    activate_price: Optional[float] = _field(_float, default=None)
    price_rate: Optional[float] = _field(_float, default=None)
    update_time: int = _field(_u64)
    working_type: str = _field(_str)
    price_protect: bool = _field(_bool)


@_model
class CanceledOrder:
    client_order_id: str = _field(_str)
    cum_qty: float = _field(_float)
    cum_quote: float = _field(_float)
    executed_qty: float = _field(_float)
    order_id: int = _field(_u64)
    orig_qty: float = _field(_float)
    orig_type: str = _field(_str)
    price: float = _field(_float)
    reduce_only: bool = _field(_bool)
    side: str = _field(_str)
    position_side: str = _field(_str)
    status: str = _field(_str)
    stop_price: float = _field(_float)
    close_position: bool = _field(_bool)
    symbol: str = _field(_str)
    time_in_force: str = _field(_str)
    type_name: str = _field(_str, key="type")
    activate_price: Optional[float] = _field(_float, default=None)
    price_rate: Optional[float] = _field(_float, default=None)
    update_time: int = _field(_u64)
    working_type: str = _field(_str)
    price_protect: bool = _field(_bool)


@_model
class Position:
    entry_price: float = _field(_float)
    margin_type: str = _field(_str)
    is_auto_add_margin: bool = _field(parse_string_or_bool)
    isolated_margin: float = _field(_float)
    leverage: str = _field(_str)
    liquidation_price: float = _field(_float)
    mark_price: float = _field(_float)
    max_notional_value: float = _field(_float)
    position_amount: float = _field(_float, key="positionAmt")
    symbol: str = _field(_str)
    unrealized_profit: float = _field(_float, key="unRealizedProfit")
    position_side: str = _field(_str)


@_model
class AccountBalance:
    account_alias: str = _field(_str)
    asset: str = _field(_str)
    balance: float = _field(_float)
    cross_wallet_balance: float = _field(_float)
    cross_unrealized_pnl: float = _field(_float, key="crossUnPnl")
    available_balance: float = _field(_float)
    max_withdraw_amount: float = _field(_float)
    margin_available: bool = _field(_bool)
    update_time: int = _field(_u64)


@_model
class ChangeLeverageResponse:
    leverage: int = _field(_u8)
    max_notional_value: float = _field(_float)
    symbol: str = _field(_str)


@_model
class OrderUpdate:
    symbol: str = _field(_str, key="s")
    new_client_order_id: str = _field(_str, key="c")
    side: str = _field(_str, key="S")
    order_type: str = _field(_str, key="o")
    time_in_force: str = _field(_str, key="f")
    qty: str = _field(_str, key="q")
    price: str = _field(_str, key="p")
    average_price: str = _field(_str, key="ap")
    stop_price: str = _field(_str, key="sp")
    execution_type: str = _field(_str, key="x")
    order_status: str = _field(_str, key="X")
    order_id: int = _field(_u64, key="i")
    qty_last_filled_trade: str = _field(_str, key="l")
    accumulated_qty_filled_trades: str = _field(_str, key="z")
    price_last_filled_trade: str = _field(_str, key="L")
    commission: Optional[str] = _optional(_str, key="n")
    trade_order_time: int = _field(_u64, key="T")
    trade_id: int = _field(_i64, key="t")
    bids_notional: str = _field(_str, key="b")
    ask_notional: str = _field(_str, key="a")
    is_buyer_maker: bool = _field(_bool, key="m")
    is_reduce_only: bool = _field(_bool, key="R")
    stop_price_working_type: str = _field(_str, key="wt")
    original_order_type: str = _field(_str, key="ot")
    position_side: str = _field(_str, key="ps")
    close_all: Optional[bool] = _optional(_bool, key="cp")
    activation_price: Optional[str] = _optional(_str, key="AP")
    callback_rate: Optional[str] = _optional(_str, key="cr")
    pp_ignore: bool = _field(_bool, key="pP")
    si_ignore: int = _field(_i32, key="si")
    ss_ignore: int = _field(_i32, key="ss")
    rp_ignore: str = _field(_str, key="rp")


@_model
class OrderTradeEvent:
    event_type: str = _field(_str, key="e")
    event_time: int = _field(_u64, key="E")
    transaction_time: int = _field(_u64, key="T")
    order: OrderUpdate = _field(_nested(OrderUpdate), key="o")