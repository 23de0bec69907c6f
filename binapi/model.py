"""Data models for REST API responses and their JSON decoding."""

from __future__ import annotations

import json
import math
from dataclasses import MISSING, Field, dataclass, field, fields, is_dataclass
from typing import Any, Callable, ClassVar, Optional, TypeVar, Union

T = TypeVar("T")
Parser = Callable[[Any], Any]


class ModelError(ValueError):
    """Raised when a JSON document does not match a model."""


class KlineValueMissingError(ModelError):
    """Raised when a kline row is too short."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"Kline value missing at index {index} ({name})")
        self.index = index
        self.name = name


# ---------------------------------------------------------------- parsers


def parse_string_or_float(value: Any) -> float:
    """Decode a number sent either as a JSON number or as a string."""
    if isinstance(value, str):
        if value == "INF":
            return math.inf
        if value != value.strip() or "_" in value:
            raise ModelError(f"invalid float literal: {value!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise ModelError(f"invalid float literal: {value!r}") from exc
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ModelError(f"expected a string or a number, got {value!r}")


def parse_string_or_bool(value: Any) -> bool:
    """Decode a boolean sent either as a JSON boolean or as ``"true"``/``"false"``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise ModelError(f"invalid boolean literal: {value!r}")
    raise ModelError(f"expected a string or a boolean, got {value!r}")


def _integer(low: int, high: int) -> Parser:
    def parse(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise ModelError(f"integer {value} out of range")
        return value

    return parse


_u8 = _integer(0, 2**8 - 1)
_u16 = _integer(0, 2**16 - 1)
_u32 = _integer(0, 2**32 - 1)
_u64 = _integer(0, 2**64 - 1)
_i64 = _integer(-(2**63), 2**63 - 1)


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise ModelError(f"expected a string, got {value!r}")
    return value


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ModelError(f"expected a boolean, got {value!r}")
    return value


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelError(f"expected a number, got {value!r}")
    return float(value)


def _list(parse: Parser) -> Parser:
    def parse_list(value: Any) -> list:
        if not isinstance(value, list):
            raise ModelError(f"expected a list, got {value!r}")
        return [parse(item) for item in value]

    return parse_list


def _nested(cls: type) -> Parser:
    return lambda value: from_json(cls, value)


def _nullable(parse: Parser) -> Parser:
    return lambda value: None if value is None else parse(value)


def _field(parse: Parser, key: Optional[str] = None, default: Any = MISSING) -> Any:
    return field(default=default, metadata={"parse": parse, "key": key})


def _optional(parse: Parser, key: Optional[str] = None) -> Any:
    return field(default=None, metadata={"parse": _nullable(parse), "key": key})


_float = parse_string_or_float
_model = dataclass(frozen=True, kw_only=True)


# ---------------------------------------------------------------- decoding


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _convert(cls: type, spec: Field, key: str, raw: Any) -> Any:
    try:
        return spec.metadata["parse"](raw)
    except KlineValueMissingError:
        raise
    except ModelError as exc:
        raise ModelError(f"{cls.__name__}.{key}: {exc}") from exc


def from_json(cls: type[T], data: Any) -> T:
    """Decode ``data`` (JSON text, a dict or a list) into an instance of ``cls``."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ModelError(f"invalid JSON: {exc}") from exc
    if not (isinstance(cls, type) and is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a model class")
    specs = fields(cls)
    if isinstance(data, list):
        if len(data) != len(specs):
            raise ModelError(
                f"invalid length {len(data)}, expected {len(specs)} elements "
                f"for {cls.__name__}"
            )
        return cls(
            **{spec.name: _convert(cls, spec, spec.name, raw) for spec, raw in zip(specs, data)}
        )
    if not isinstance(data, dict):
        raise ModelError(f"expected an object for {cls.__name__}, got {data!r}")
    camel = getattr(cls, "_camel_case", True)
    values = {}
    for spec in specs:
        key = spec.metadata.get("key") or (_camel(spec.name) if camel else spec.name)
        if key in data:
            values[spec.name] = _convert(cls, spec, key, data[key])
        elif spec.default is MISSING:
            raise ModelError(f"missing field {key!r} in {cls.__name__}")
    return cls(**values)


# ---------------------------------------------------------------- general


@_model
class ServerTime:
    server_time: int = _field(_u64)


@_model
class RateLimit:
    rate_limit_type: str = _field(_str)
    interval: str = _field(_str)
    interval_num: int = _field(_u16)
    limit: int = _field(_u64)


# ---------------------------------------------------------------- filters


@_model
class PriceFilter:
    filter_type: ClassVar[str] = "PRICE_FILTER"
    min_price: str = _field(_str)
    max_price: str = _field(_str)
    tick_size: str = _field(_str)


@_model
class PercentPrice:
    filter_type: ClassVar[str] = "PERCENT_PRICE"
    multiplier_up: str = _field(_str)
    multiplier_down: str = _field(_str)
    avg_price_mins: Optional[float] = _optional(_number)


@_model
class LotSize:
    filter_type: ClassVar[str] = "LOT_SIZE"
    min_qty: str = _field(_str)
    max_qty: str = _field(_str)
    step_size: str = _field(_str)


@_model
class MinNotional:
    filter_type: ClassVar[str] = "MIN_NOTIONAL"
    notional: Optional[str] = _optional(_str)
    min_notional: Optional[str] = _optional(_str)
    apply_to_market: Optional[bool] = _optional(_bool)
    avg_price_mins: Optional[float] = _optional(_number)


@_model
class IcebergParts:
    filter_type: ClassVar[str] = "ICEBERG_PARTS"
    limit: Optional[int] = _optional(_u16)


@_model
class MaxNumOrders:
    filter_type: ClassVar[str] = "MAX_NUM_ORDERS"
    max_num_orders: Optional[int] = _optional(_u16)


@_model
class MaxNumAlgoOrders:
    filter_type: ClassVar[str] = "MAX_NUM_ALGO_ORDERS"
    max_num_algo_orders: Optional[int] = _optional(_u16)


@_model
class MaxNumIcebergOrders:
    filter_type: ClassVar[str] = "MAX_NUM_ICEBERG_ORDERS"
    max_num_iceberg_orders: int = _field(_u16)


@_model
class MaxPosition:
    filter_type: ClassVar[str] = "MAX_POSITION"
    max_position: str = _field(_str)


@_model
class MarketLotSize:
    filter_type: ClassVar[str] = "MARKET_LOT_SIZE"
    min_qty: str = _field(_str)
    max_qty: str = _field(_str)
    step_size: str = _field(_str)


@_model
class TrailingDelta:
    filter_type: ClassVar[str] = "TRAILING_DELTA"
    min_trailing_above_delta: Optional[int] = _optional(_u16)
    max_trailing_above_delta: Optional[int] = _optional(_u16)
    min_trailing_below_delta: Optional[int] = _optional(_u16)
    max_trailing_below_delta: Optional[int] = _optional(_u16)


Filter = Union[
    PriceFilter,
    PercentPrice,
    LotSize,
    MinNotional,
    IcebergParts,
    MaxNumOrders,
    MaxNumAlgoOrders,
    MaxNumIcebergOrders,
    MaxPosition,
    MarketLotSize,
    TrailingDelta,
]

_FILTERS: dict[str, type] = {
    cls.filter_type: cls
    for cls in (
        PriceFilter,
        PercentPrice,
        LotSize,
        MinNotional,
        IcebergParts,
        MaxNumOrders,
        MaxNumAlgoOrders,
        MaxNumIcebergOrders,
        MaxPosition,
        MarketLotSize,
        TrailingDelta,
    )
}


def parse_filter(data: Any) -> Filter:
    """Decode a symbol filter, choosing its class by ``filterType``."""
    if not isinstance(data, dict):
        raise ModelError(f"expected an object for a filter, got {data!r}")
    if "filterType" not in data:
        raise ModelError("missing field 'filterType'")
    kind = data["filterType"]
    try:
        cls = _FILTERS[kind]
    except (KeyError, TypeError):
        raise ModelError(f"unknown filter type {kind!r}") from None
    return from_json(cls, data)


# ---------------------------------------------------------------- exchange info


@_model
class Symbol:
    symbol: str = _field(_str)
    status: str = _field(_str)
    base_asset: str = _field(_str)
    base_asset_precision: int = _field(_u64)
    quote_asset: str = _field(_str)
    quote_precision: int = _field(_u64)
    order_types: list[str] = _field(_list(_str))
    iceberg_allowed: bool = _field(_bool)
    is_spot_trading_allowed: bool = _field(_bool)
    is_margin_trading_allowed: bool = _field(_bool)
    filters: list[Filter] = _field(_list(parse_filter))


@_model
class ExchangeInformation:
    timezone: str = _field(_str)
    server_time: int = _field(_u64)
    rate_limits: list[RateLimit] = _field(_list(_nested(RateLimit)))
    symbols: list[Symbol] = _field(_list(_nested(Symbol)))


# ---------------------------------------------------------------- account


@_model
class Balance:
    asset: str = _field(_str)
    free: str = _field(_str)
    locked: str = _field(_str)


@_model
class AccountInformation:
    maker_commission: float = _field(_number)
    taker_commission: float = _field(_number)
    buyer_commission: float = _field(_number)
    seller_commission: float = _field(_number)
    can_trade: bool = _field(_bool)
    can_withdraw: bool = _field(_bool)
    can_deposit: bool = _field(_bool)
    balances: list[Balance] = _field(_list(_nested(Balance)))


@_model
class Order:
    symbol: str = _field(_str)
    order_id: int = _field(_u64)
    order_list_id: int = _field(_i64)
    client_order_id: str = _field(_str)
    price: float = _field(_float)
    orig_qty: str = _field(_str)
    executed_qty: str = _field(_str)
    cummulative_quote_qty: str = _field(_str)
    status: str = _field(_str)
    time_in_force: str = _field(_str)
    type_name: str = _field(_str, key="type")
    side: str = _field(_str)
    stop_price: float = _field(_float)
    iceberg_qty: str = _field(_str)
    time: int = _field(_u64)
    update_time: int = _field(_u64)
    is_working: bool = _field(_bool)
    orig_quote_order_qty: str = _field(_str)


@_model
class OrderCanceled:
    symbol: str = _field(_str)
    orig_client_order_id: Optional[str] = _optional(_str)
    order_id: Optional[int] = _optional(_u64)
    client_order_id: Optional[str] = _optional(_str)


@_model
class FillInfo:
    price: float = _field(_float)
    qty: float = _field(_float)
    commission: float = _field(_float)
    commission_asset: str = _field(_str)
    trade_id: Optional[int] = _optional(_u64)


@_model
class Transaction:
    symbol: str = _field(_str)
    order_id: int = _field(_u64)
    order_list_id: Optional[int] = _optional(_i64)
    client_order_id: str = _field(_str)
    transact_time: int = _field(_u64)
    price: float = _field(_float)
    orig_qty: float = _field(_float)
    executed_qty: float = _field(_float)
    cummulative_quote_qty: float = _field(_float)
    stop_price: float = _field(_float, default=0.0)
    status: str = _field(_str)
    time_in_force: str = _field(_str)
    type_name: str = _field(_str, key="type")
    side: str = _field(_str)
    fills: Optional[list[FillInfo]] = _optional(_list(_nested(FillInfo)))


# ---------------------------------------------------------------- market data


@_model
class Bids:
    price: float = _field(_float)
    qty: float = _field(_float)


@_model
class Asks:
    price: float = _field(_float)
    qty: float = _field(_float)


@_model
class OrderBook:
    last_update_id: int = _field(_u64)
    bids: list[Bids] = _field(_list(_nested(Bids)))
    asks: list[Asks] = _field(_list(_nested(Asks)))


@_model
class UserDataStream:
    listen_key: str = _field(_str)


@_model
class SymbolPrice:
    symbol: str = _field(_str)
    price: float = _field(_float)


@_model
class AveragePrice:
    mins: int = _field(_u64)
    price: float = _field(_float)


@_model
class Tickers:
    symbol: str = _field(_str)
    bid_price: float = _field(_float)
    bid_qty: float = _field(_float)
    ask_price: float = _field(_float)
    ask_qty: float = _field(_float)


@_model
class TradeHistory:
    id: int = _field(_u64)
    price: float = _field(_float)
    qty: float = _field(_float)
    commission: str = _field(_str)
    commission_asset: str = _field(_str)
    time: int = _field(_u64)
    is_buyer: bool = _field(_bool)
    is_maker: bool = _field(_bool)
    is_best_match: bool = _field(_bool)


@_model
class PriceStats:
    symbol: str = _field(_str)
    price_change: str = _field(_str)
    price_change_percent: str = _field(_str)
    weighted_avg_price: str = _field(_str)
    prev_close_price: float = _field(_float)
    last_price: float = _field(_float)
    bid_price: float = _field(_float)
    ask_price: float = _field(_float)
    open_price: float = _field(_float)
    high_price: float = _field(_float)
    low_price: float = _field(_float)
    volume: float = _field(_float)
    open_time: int = _field(_u64)
    close_time: int = _field(_u64)
    first_id: int = _field(_i64)
    last_id: int = _field(_i64)
    count: int = _field(_u64)


@_model
class AggTrade:
    time: int = _field(_u64, key="T")
    agg_id: int = _field(_u64, key="a")
    first_id: int = _field(_u64, key="f")
    last_id: int = _field(_u64, key="l")
    maker: bool = _field(_bool, key="m")
    best_match: bool = _field(_bool, key="M")
    price: float = _field(_float, key="p")
    qty: float = _field(_float, key="q")


@_model
class KlineSummary:
    _camel_case: ClassVar[bool] = False
    open_time: int = _field(_i64)
    open: str = _field(_str)
    high: str = _field(_str)
    low: str = _field(_str)
    close: str = _field(_str)
    volume: str = _field(_str)
    close_time: int = _field(_i64)
    quote_asset_volume: str = _field(_str)
    number_of_trades: int = _field(_i64)
    taker_buy_base_asset_volume: str = _field(_str)
    taker_buy_quote_asset_volume: str = _field(_str)

    @classmethod
    def from_row(cls, row: list) -> KlineSummary:
        """Decode a kline from the positional row the REST API returns."""
        values = {}
        for index, spec in enumerate(fields(cls)):
            if index >= len(row):
                raise KlineValueMissingError(index, spec.name)
            values[spec.name] = _convert(cls, spec, spec.name, row[index])
        return cls(**values)


# ---------------------------------------------------------------- wallet


@_model
class Network:
    address_regex: str = _field(_str)
    coin: str = _field(_str)
    deposit_desc: Optional[str] = _optional(_str)
    deposit_enable: bool = _field(_bool)
    is_default: bool = _field(_bool)
    memo_regex: str = _field(_str)
    min_confirm: int = _field(_u32)
    name: str = _field(_str)
    network: str = _field(_str)
    reset_address_status: bool = _field(_bool)
    special_tips: Optional[str] = _optional(_str)
    un_lock_confirm: int = _field(_u32)
    withdraw_desc: Optional[str] = _optional(_str)
    withdraw_enable: bool = _field(_bool)
    withdraw_fee: float = _field(_float)
    withdraw_min: float = _field(_float)
    withdraw_integer_multiple: Optional[str] = _optional(_str)


@_model
class CoinInfo:
    coin: str = _field(_str)
    deposit_all_enable: bool = _field(_bool)
    free: float = _field(_float)
    freeze: float = _field(_float)
    ipoable: float = _field(_float)
    ipoing: float = _field(_float)
    is_legal_money: bool = _field(_bool)
    locked: float = _field(_float)
    name: str = _field(_str)
    network_list: list[Network] = _field(_list(_nested(Network)))
    storage: float = _field(_float)
    trading: bool = _field(_bool)
    withdraw_all_enable: bool = _field(_bool)
    withdrawing: float = _field(_float)


@_model
class AssetDetail:
    min_withdraw_amount: float = _field(_float)
    deposit_status: bool = _field(_bool)
    withdraw_fee: float = _field(_float)
    withdraw_status: bool = _field(_bool)
    deposit_tip: Optional[str] = _optional(_str)


@_model
class DepositAddress:
    address: str = _field(_str)
    coin: str = _field(_str)
    tag: str = _field(_str)
    url: str = _field(_str)