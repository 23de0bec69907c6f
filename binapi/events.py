"""Data models for websocket stream events."""

from __future__ import annotations

from typing import Any, Optional

from binapi.model import (
    Asks,
    Bids,
    _bool,
    _field,
    _i64,
    _list,
    _model,
    _nested,
    _optional,
    _str,
    _u64,
)


def _key(parse: Any, key: str) -> Any:
    return _field(parse, key=key)


@_model
class EventBalance:
    asset: str = _key(_str, "a")
    free: str = _key(_str, "f")
    locked: str = _key(_str, "l")


@_model
class AccountUpdateEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    m: int = _key(_u64, "m")
    t: int = _key(_u64, "t")
    b: int = _key(_u64, "b")
    s: int = _key(_u64, "s")
    t_ignore: bool = _key(_bool, "T")
    w_ignore: bool = _key(_bool, "W")
    d_ignore: bool = _key(_bool, "D")
    balance: list[EventBalance] = _key(_list(_nested(EventBalance)), "B")


@_model
class BalanceUpdateEvent:
    balance: list[EventBalance] = _key(_list(_nested(EventBalance)), "B")
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    last_account_update_time: int = _key(_u64, "u")


@_model
class OrderTradeEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    new_client_order_id: str = _key(_str, "c")
    side: str = _key(_str, "S")
    order_type: str = _key(_str, "o")
    time_in_force: str = _key(_str, "f")
    qty: str = _key(_str, "q")
    price: str = _key(_str, "p")
    execution_type: str = _key(_str, "x")
    order_status: str = _key(_str, "X")
    order_reject_reason: str = _key(_str, "r")
    order_id: int = _key(_u64, "i")
    qty_last_filled_trade: str = _key(_str, "l")
    accumulated_qty_filled_trades: str = _key(_str, "z")
    price_last_filled_trade: str = _key(_str, "L")
    commission: str = _key(_str, "n")
    trade_order_time: int = _key(_u64, "T")
    trade_id: int = _key(_i64, "t")
    is_buyer_maker: bool = _key(_bool, "m")


@_model
class AggrTradesEvent:
    """Trade information aggregated for a single taker order (``<symbol>@aggTrade``)."""

    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    aggregated_trade_id: int = _key(_u64, "a")
    price: str = _key(_str, "p")
    qty: str = _key(_str, "q")
    first_break_trade_id: int = _key(_u64, "f")
    last_break_trade_id: int = _key(_u64, "l")
    trade_order_time: int = _key(_u64, "T")
    is_buyer_maker: bool = _key(_bool, "m")


@_model
class TradeEvent:
    """Raw trade information (``<symbol>@trade``)."""

    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    trade_id: int = _key(_u64, "t")
    price: str = _key(_str, "p")
    qty: str = _key(_str, "q")
    buyer_order_id: int = _key(_u64, "b")
    seller_order_id: int = _key(_u64, "a")
    trade_order_time: int = _key(_u64, "T")
    is_buyer_maker: bool = _key(_bool, "m")


@_model
class IndexPriceEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    pair: str = _key(_str, "i")
    price: str = _key(_str, "p")


@_model
class MarkPriceEvent:
    event_time: int = _key(_u64, "E")
    estimate_settle_price: str = _key(_str, "P")
    next_funding_time: int = _key(_u64, "T")
    event_type: str = _key(_str, "e")
    index_price: Optional[str] = _optional(_str, key="i")
    mark_price: str = _key(_str, "p")
    funding_rate: str = _key(_str, "r")
    symbol: str = _key(_str, "s")


@_model
class LiquidationOrder:
    symbol: str = _key(_str, "s")
    side: str = _key(_str, "S")
    order_type: str = _key(_str, "o")
    time_in_force: str = _key(_str, "f")
    original_quantity: str = _key(_str, "q")
    price: str = _key(_str, "p")
    average_price: str = _key(_str, "ap")
    order_status: str = _key(_str, "X")
    order_last_filled_quantity: str = _key(_str, "l")
    order_filled_accumulated_quantity: str = _key(_str, "z")
    order_trade_time: int = _key(_u64, "T")


@_model
class LiquidationEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    liquidation_order: LiquidationOrder = _key(_nested(LiquidationOrder), "o")


@_model
class BookTickerEvent:
    update_id: int = _key(_u64, "u")
    symbol: str = _key(_str, "s")
    best_bid: str = _key(_str, "b")
    best_bid_qty: str = _key(_str, "B")
    best_ask: str = _key(_str, "a")
    best_ask_qty: str = _key(_str, "A")


@_model
class DayTickerEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    price_change: str = _key(_str, "p")
    price_change_percent: str = _key(_str, "P")
    average_price: str = _key(_str, "w")
    prev_close: str = _key(_str, "x")
    current_close: str = _key(_str, "c")
    current_close_qty: str = _key(_str, "Q")
    best_bid: str = _key(_str, "b")
    best_bid_qty: str = _key(_str, "B")
    best_ask: str = _key(_str, "a")
    best_ask_qty: str = _key(_str, "A")
    open: str = _key(_str, "o")
    high: str = _key(_str, "h")
    low: str = _key(_str, "l")
    volume: str = _key(_str, "v")
    quote_volume: str = _key(_str, "q")
    open_time: int = _key(_u64, "O")
    close_time: int = _key(_u64, "C")
    first_trade_id: int = _key(_i64, "F")
    last_trade_id: int = _key(_i64, "L")
    num_trades: int = _key(_u64, "n")


@_model
class MiniTickerEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    close: str = _key(_str, "c")
    open: str = _key(_str, "o")
    high: str = _key(_str, "h")
    low: str = _key(_str, "l")
    volume: str = _key(_str, "v")
    quote_volume: str = _key(_str, "q")


@_model
class Kline:
    open_time: int = _key(_i64, "t")
    close_time: int = _key(_i64, "T")
    symbol: str = _key(_str, "s")
    interval: str = _key(_str, "i")
    first_trade_id: int = _key(_i64, "f")
    last_trade_id: int = _key(_i64, "L")
    open: str = _key(_str, "o")
    close: str = _key(_str, "c")
    high: str = _key(_str, "h")
    low: str = _key(_str, "l")
    volume: str = _key(_str, "v")
    number_of_trades: int = _key(_i64, "n")
    is_final_bar: bool = _key(_bool, "x")
    quote_asset_volume: str = _key(_str, "q")
    taker_buy_base_asset_volume: str = _key(_str, "V")
    taker_buy_quote_asset_volume: str = _key(_str, "Q")


@_model
class KlineEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    kline: Kline = _key(_nested(Kline), "k")


@_model
class ContinuousKline:
    start_time: int = _key(_i64, "t")
    end_time: int = _key(_i64, "T")
    interval: str = _key(_str, "i")
    first_trade_id: int = _key(_i64, "f")
    last_trade_id: int = _key(_i64, "L")
    open: str = _key(_str, "o")
    close: str = _key(_str, "c")
    high: str = _key(_str, "h")
    low: str = _key(_str, "l")
    volume: str = _key(_str, "v")
    number_of_trades: int = _key(_i64, "n")
    is_final_bar: bool = _key(_bool, "x")
    quote_volume: str = _key(_str, "q")
    active_buy_volume: str = _key(_str, "V")
    active_volume_buy_quote: str = _key(_str, "Q")


@_model
class ContinuousKlineEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    pair: str = _key(_str, "ps")
    contract_type: str = _key(_str, "ct")
    kline: ContinuousKline = _key(_nested(ContinuousKline), "k")


@_model
class IndexKline:
    start_time: int = _key(_i64, "t")
    end_time: int = _key(_i64, "T")
    interval: str = _key(_str, "i")
    first_trade_id: int = _key(_i64, "f")
    last_trade_id: int = _key(_i64, "L")
    open: str = _key(_str, "o")
    close: str = _key(_str, "c")
    high: str = _key(_str, "h")
    low: str = _key(_str, "l")
    volume: str = _key(_str, "v")
    number_of_trades: int = _key(_i64, "n")
    is_final_bar: bool = _key(_bool, "x")


@_model
class IndexKlineEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    pair: str = _key(_str, "ps")
    kline: IndexKline = _key(_nested(IndexKline), "k")


@_model
class DepthOrderBookEvent:
    event_type: str = _key(_str, "e")
    event_time: int = _key(_u64, "E")
    symbol: str = _key(_str, "s")
    first_update_id: int = _key(_u64, "U")
    final_update_id: int = _key(_u64, "u")
    previous_final_update_id: Optional[int] = _optional(_u64, key="pu")
    bids: list[Bids] = _key(_list(_nested(Bids)), "b")
    asks: list[Asks] = _key(_list(_nested(Asks)), "a")