"""Spot market websocket streams: URLs, event decoding and the read loop."""

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
    BalanceUpdateEvent,
    BookTickerEvent,
    DayTickerEvent,
    DepthOrderBookEvent,
    KlineEvent,
    OrderTradeEvent,
    TradeEvent,
)
from binapi.model import ModelError, OrderBook, _list, _nested

SPOT_STREAM_HOST = "wss://stream.binance.com:9443"


class WebsocketError(Exception):
    """Raised when a stream cannot be opened, read or handled."""


class WebsocketEventKind(Enum):
    ACCOUNT_UPDATE = "account_update"
    BALANCE_UPDATE = "balance_update"
    ORDER_TRADE = "order_trade"
    AGGR_TRADES = "aggr_trades"
    TRADE = "trade"
    ORDER_BOOK = "order_book"
    DAY_TICKER = "day_ticker"
    DAY_TICKER_ALL = "day_ticker_all"
    KLINE = "kline"
    DEPTH_ORDER_BOOK = "depth_order_book"
    BOOK_TICKER = "book_ticker"


@dataclass(frozen=True)
class WebsocketEvent:
    """A decoded stream message together with its kind."""

    kind: WebsocketEventKind
    data: Any


# Tried in this order; the first shape that decodes wins.
_CANDIDATES: tuple[tuple[WebsocketEventKind, Callable[[Any], Any]], ...] = (
    (WebsocketEventKind.DAY_TICKER_ALL, _list(_nested(DayTickerEvent))),
    (WebsocketEventKind.BALANCE_UPDATE, _nested(BalanceUpdateEvent)),
    (WebsocketEventKind.DAY_TICKER, _nested(DayTickerEvent)),
    (WebsocketEventKind.BOOK_TICKER, _nested(BookTickerEvent)),
    (WebsocketEventKind.ACCOUNT_UPDATE, _nested(AccountUpdateEvent)),
    (WebsocketEventKind.ORDER_TRADE, _nested(OrderTradeEvent)),
    (WebsocketEventKind.AGGR_TRADES, _nested(AggrTradesEvent)),
    (WebsocketEventKind.TRADE, _nested(TradeEvent)),
    (WebsocketEventKind.KLINE, _nested(KlineEvent)),
    (WebsocketEventKind.ORDER_BOOK, _nested(OrderBook)),
    (WebsocketEventKind.DEPTH_ORDER_BOOK, _nested(DepthOrderBookEvent)),
)


def spot_stream_url(subscription: str) -> str:
    """URL of a single raw stream."""
    return f"{SPOT_STREAM_HOST}/ws/{subscription}"


def multi_stream_url(subscriptions: Sequence[str]) -> str:
    """URL of a combined stream over several subscriptions."""
    return f"{SPOT_STREAM_HOST}/stream?streams={'/'.join(subscriptions)}"


def custom_stream_url(ws_endpoint: str, subscription: str) -> str:
    """URL of a stream on a configured endpoint."""
    return f"{ws_endpoint}/{subscription}"


def _decode(message: Any) -> Any:
    if isinstance(message, (str, bytes, bytearray)):
        try:
            return json.loads(message)
        except ValueError as exc:
            raise WebsocketError(f"invalid JSON: {exc}") from exc
    return message


def parse_event(message: Any) -> Optional[WebsocketEvent]:
    """Decode a stream message; return ``None`` when it matches no known event.

    Combined-stream messages wrap the payload in a ``data`` member, which is
    unwrapped first.
    """
    value = _decode(message)
    while isinstance(value, dict) and "data" in value:
        value = value["data"]
    for kind, parse in _CANDIDATES:
        try:
            return WebsocketEvent(kind, parse(value))
        except ModelError:
            continue
    return None


class WebSockets:
    """A spot stream connection that passes every decoded event to a handler."""

    def __init__(self, handler: Callable[[WebsocketEvent], Any]) -> None:
        self.socket: Any = None
        self._handler = handler

    def connect(self, subscription: str) -> None:
        self._connect_wss(spot_stream_url(subscription))

    def connect_with_endpoint(self, ws_endpoint: str, subscription: str) -> None:
        self._connect_wss(custom_stream_url(ws_endpoint, subscription))

    def connect_multiple_streams(self, endpoints: Sequence[str]) -> None:
        self._connect_wss(multi_stream_url(endpoints))

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
        event = parse_event(msg)
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