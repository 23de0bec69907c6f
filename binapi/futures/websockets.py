"""Futures market websocket streams: URLs, event decoding and the read loop."""

from __future__ import annotations

import json
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

import websocket
from websocket import ABNF

from binapi.events import (
    AccountUpdateEvent,
    AggrTradesEvent,
    BookTickerEvent,
    ContinuousKlineEvent,
    DayTickerEvent,
    DepthOrderBookEvent,
    IndexKlineEvent,
    IndexPriceEvent,
    KlineEvent,
    LiquidationEvent,
    MarkPriceEvent,
    MiniTickerEvent,
    TradeEvent,
)
from binapi.futures.model import OrderTradeEvent
from binapi.model import ModelError, OrderBook, _list, _nested
from binapi.websockets import WebsocketError


class FuturesMarket(Enum):
    """The futures markets, each with its own stream host."""

    USDM = "wss://fstream.binance.com"
    COINM = "wss://dstream.binance.com"
    VANILLA = "wss://vstream.binance.com"


class FuturesWebsocketEventKind(Enum):
    ACCOUNT_UPDATE = "account_update"
    ORDER_TRADE = "order_trade"
    AGGR_TRADES = "aggr_trades"
    TRADE = "trade"
    ORDER_BOOK = "order_book"
    DAY_TICKER = "day_ticker"
    MINI_TICKER = "mini_ticker"
    MINI_TICKER_ALL = "mini_ticker_all"
    INDEX_PRICE = "index_price"
    MARK_PRICE = "mark_price"
    MARK_PRICE_ALL = "mark_price_all"
    DAY_TICKER_ALL = "day_ticker_all"
    KLINE = "kline"
    CONTINUOUS_KLINE = "continuous_kline"
    INDEX_KLINE = "index_kline"
    LIQUIDATION = "liquidation"
    DEPTH_ORDER_BOOK = "depth_order_book"
    BOOK_TICKER = "book_ticker"


@dataclass(frozen=True)
class FuturesWebsocketEvent:
    """A decoded futures stream message together with its kind."""

    kind: FuturesWebsocketEventKind
    data: Any


_Kind = FuturesWebsocketEventKind

# Tried in this order; the first shape that decodes wins.
_CANDIDATES: tuple[tuple[FuturesWebsocketEventKind, Callable[[Any], Any]], ...] = (
    (_Kind.DAY_TICKER_ALL, _list(_nested(DayTickerEvent))),
    (_Kind.DAY_TICKER, _nested(DayTickerEvent)),
    (_Kind.BOOK_TICKER, _nested(BookTickerEvent)),
    (_Kind.MINI_TICKER, _nested(MiniTickerEvent)),
    (_Kind.MINI_TICKER_ALL, _list(_nested(MiniTickerEvent))),
    (_Kind.ACCOUNT_UPDATE, _nested(AccountUpdateEvent)),
    (_Kind.ORDER_TRADE, _nested(OrderTradeEvent)),
    (_Kind.AGGR_TRADES, _nested(AggrTradesEvent)),
    (_Kind.INDEX_PRICE, _nested(IndexPriceEvent)),
    (_Kind.MARK_PRICE, _nested(MarkPriceEvent)),
    (_Kind.MARK_PRICE_ALL, _list(_nested(MarkPriceEvent))),
    (_Kind.TRADE, _nested(TradeEvent)),
    (_Kind.KLINE, _nested(KlineEvent)),
    (_Kind.CONTINUOUS_KLINE, _nested(ContinuousKlineEvent)),
    (_Kind.INDEX_KLINE, _nested(IndexKlineEvent)),
    (_Kind.LIQUIDATION, _nested(LiquidationEvent)),
    (_Kind.ORDER_BOOK, _nested(OrderBook)),
    (_Kind.DEPTH_ORDER_BOOK, _nested(DepthOrderBookEvent)),
)


def futures_stream_url(market: FuturesMarket, subscription: str) -> str:
    """URL of a single raw stream on ``market``."""
    return f"{market.value}/ws/{subscription}"


def futures_multi_stream_url(market: FuturesMarket, subscriptions: Sequence[str]) -> str:
    """URL of a combined stream over several subscriptions on ``market``."""
    return f"{market.value}/stream?streams={'/'.join(subscriptions)}"


def _decode(message: Any) -> Any:
    if isinstance(message, (str, bytes, bytearray)):
        try:
            return json.loads(message)
        except ValueError as exc:
            raise WebsocketError(f"invalid JSON: {exc}") from exc
    return message


def parse_futures_event(message: Any) -> Optional[FuturesWebsocketEvent]:
    """Decode a futures stream message; return ``None`` when it matches no known event.

    Combined-stream messages wrap the payload in a ``data`` member, which is
    unwrapped first.
    """
    value = _decode(message)
    while isinstance(value, dict) and "data" in value:
        value = value["data"]
    for kind, parse in _CANDIDATES:
        try:
            return FuturesWebsocketEvent(kind, parse(value))
        except ModelError:
            continue
    return None


class FuturesWebSockets:
    """A futures stream connection that passes every decoded event to a handler."""

    def __init__(self, handler: Callable[[FuturesWebsocketEvent], Any]) -> None:
        self.socket: Any = None
        self._handler = handler

    def connect(self, market: FuturesMarket, subscription: str) -> None:
        self._connect_wss(futures_stream_url(market, subscription))

    def connect_with_endpoint(self, ws_endpoint: str) -> None:
        """Connect to a configured endpoint, used exactly as given."""
        self._connect_wss(ws_endpoint)

    def connect_multiple_streams(self, market: FuturesMarket, endpoints: Sequence[str]) -> None:
        self._connect_wss(futures_multi_stream_url(market, endpoints))

    def _connect_wss(self, url: str) -> None:
        try:
            self.socket = websocket.create_connection(url)
        except (websocket.WebSocketException, OSError, ValueError) as exc:
            raise WebsocketError(f"Error during handshake {exc}") from exc

    def disconnect(self) -> None:
        if self.socket is None:
            raise WebsocketError("Not able to close the connection")
        self.socket.close()

    def handle_msg(self, msg: Any) -> None:
        """Decode one message and hand the event, if any, to the handler."""
        event = parse_futures_event(msg)
        if event is not None:
            self._handler(event)

    def event_loop(self, running: threading.Event) -> None:
        """Read and handle messages for as long as ``running`` is set."""
        while running.is_set():
            if self.socket is None:
                time.sleep(0.01)
                continue
            try:
                opcode, payload = self.socket.recv_data()
            except websocket.WebSocketException as exc:
                raise WebsocketError(str(exc)) from exc
            if opcode == ABNF.OPCODE_TEXT:
                text = payload.decode("utf-8") if isinstance(payload, (bytes, bytearray)) else payload
                try:
                    self.handle_msg(text)
                except Exception as exc:
                    raise WebsocketError(f"Error on handling stream message: {exc}") from exc
            elif opcode == ABNF.OPCODE_CLOSE:
                raise WebsocketError(f"Disconnected {payload!r}")