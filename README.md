# binapi

Building blocks for working with the Binance spot and futures APIs:

- query-string builders for public and timestamped requests (`binapi.util`)
- frozen dataclass models for REST responses (`binapi.model`, `binapi.futures.model`)
- models for stream events (`binapi.events`)
- futures order parameter builders (`binapi.futures.orders`)
- websocket stream clients for spot and futures markets
  (`binapi.websockets`, `binapi.futures.websockets`)

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building query strings

`build_request` sorts the parameters by key and joins them as `key=value`
pairs separated by `&`. `build_signed_request` adds `recvWindow` (only when it
is greater than zero) and a millisecond `timestamp` taken from the current UTC
time; `build_signed_request_custom` takes the time as a `datetime` instead (a
naive one is read as UTC; one before the epoch raises `ValueError`).

```python
from binapi.util import build_request, build_signed_request

build_request({"symbol": "BTCUSDT", "limit": "5"})
# 'limit=5&symbol=BTCUSDT'

query = build_signed_request({"symbol": "BTCUSDT"}, 5000)
# 'recvWindow=5000&symbol=BTCUSDT&timestamp=...'
```

`to_i64` and `to_f64` check and convert single decoded JSON values.

## Decoding responses

`from_json(cls, data)` decodes JSON text, a dict or a positional list into a
model class. Field names are looked up in camelCase unless a model names its
own key. Anything that does not fit raises `ModelError`.

```python
from binapi.model import KlineSummary, OrderBook, from_json

book = from_json(OrderBook, {
    "lastUpdateId": 1,
    "bids": [["4.00000000", "431.00000000"]],
    "asks": [["4.00000200", "12.00000000"]],
})
book.bids[0].price  # 4.0

kline = KlineSummary.from_row([1499040000000, "0.01634790", "0.80000000",
                               "0.01575800", "0.01577100", "148976.11427815",
                               1499644799999, "2434.19055334", 308,
                               "1756.87402397", "28.46694368"])
```

Numeric fields sent as strings are converted to floats by
`parse_string_or_float`; the string `"INF"` becomes infinity. Booleans sent as
`"true"`/`"false"` are read by `parse_string_or_bool`. A kline row that is too
short raises `KlineValueMissingError`, which carries the missing `index` and
`name`. Symbol filters are decoded by `parse_filter`, which picks the class
(`PriceFilter`, `LotSize`, `MinNotional`, `TrailingDelta`, ...) from
`filterType`.

Futures responses (`Position`, `AccountBalance`, `Transaction`,
`CanceledOrder`, `MarkPrice`, `OpenInterest`, the futures `OrderTradeEvent`
and others) live in `binapi.futures.model` and decode the same way.

## Futures orders

```python
from binapi.futures.orders import build_order, limit_order, signed_order_query

order = limit_order("BTCUSDT", "BUY", 0.01, 30000.0, "GTC")
build_order(order)
# {'symbol': 'BTCUSDT', 'side': 'BUY', 'type': 'LIMIT',
#  'timeInForce': 'GTC', 'quantity': '0.01', 'price': '30000'}
query = signed_order_query(order, 5000)
```

`market_order` and `stop_market_close_order` build the other common orders.
`CustomOrderRequest` covers every field an order can carry: position side,
reduce-only, stop and activation prices, callback rate, working type and price
protection. Unset fields are left out of the parameters. The enums
`ContractType`, `PositionSide`, `OrderType` and `WorkingType` hold the
exchange's names.

## Streams

```python
import threading
from binapi.websockets import WebSockets

running = threading.Event()
running.set()

def on_event(event):
    print(event.kind, event.data)

ws = WebSockets(on_event)
ws.connect("btcusdt@aggTrade")
ws.event_loop(running)
ws.disconnect()
```

`event_loop` reads messages while `running` is set and hands each decoded
`WebsocketEvent` (a `kind` and its `data`) to the handler. A close frame, a
read failure or an error raised while handling a message ends the loop with
`WebsocketError`. Messages that match no known event are ignored.

Combined streams are opened with `connect_multiple_streams`; their `data`
envelope is unwrapped before decoding. `connect_with_endpoint` connects to
`<endpoint>/<subscription>` on a host of your choosing.

Futures streams work the same way through `FuturesWebSockets`, choosing a
`FuturesMarket` (`USDM`, `COINM` or `VANILLA`). Its `connect_with_endpoint`
uses the given URL exactly as it is.

Messages can also be fed directly with `handle_msg`, or decoded without a
connection using `parse_event` and `parse_futures_event`. URLs can be built
with `spot_stream_url`, `multi_stream_url`, `custom_stream_url`,
`futures_stream_url` and `futures_multi_stream_url`.

## What this package does not do

It does not send REST requests. There is no HTTP client, and no signing of
requests with an API secret: the signed query builders add only `recvWindow`
and `timestamp`. Sending requests, adding a signature and decoding the replies
with the models here is left to the caller. User-data stream listen keys are
not obtained or renewed either. Only the websocket clients open connections.