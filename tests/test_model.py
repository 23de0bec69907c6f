import json
import math

import pytest

from binapi.model import (
    AccountInformation,
    AggTrade,
    AssetDetail,
    Bids,
    CoinInfo,
    ExchangeInformation,
    KlineSummary,
    KlineValueMissingError,
    LotSize,
    MinNotional,
    ModelError,
    Order,
    OrderBook,
    OrderCanceled,
    PriceFilter,
    ServerTime,
    SymbolPrice,
    TrailingDelta,
    Transaction,
    from_json,
    parse_filter,
    parse_string_or_bool,
    parse_string_or_float,
)

KLINE_ROW = [
    1499040000000,
    "0.01634790",
    "0.80000000",
    "0.01575800",
    "0.01577100",
    "148976.11427815",
    1499644799999,
    "2434.19055334",
    308,
    "1756.87402397",
    "28.46694368",
    "17928899.62484339",
]


def test_string_or_float_inf():
    assert parse_string_or_float("INF") == math.inf


def test_string_or_float_accepts_string_and_number():
    assert parse_string_or_float("0.01634790") == 0.0163479
    assert parse_string_or_float(2) == 2.0
    assert parse_string_or_float(1.25) == 1.25


@pytest.mark.parametrize("value", ["abc", True, None, [1], " 1"])
def test_string_or_float_rejects(value):
    with pytest.raises(ModelError):
        parse_string_or_float(value)


def test_string_or_bool():
    assert parse_string_or_bool("true") is True
    assert parse_string_or_bool("false") is False
    assert parse_string_or_bool(False) is False


@pytest.mark.parametrize("value", ["TRUE", "yes", 1, None])
def test_string_or_bool_rejects(value):
    with pytest.raises(ModelError):
        parse_string_or_bool(value)


def test_server_time_from_dict_and_text():
    assert from_json(ServerTime, {"serverTime": 1499827319559}).server_time == 1499827319559
    text = json.dumps({"serverTime": 1499827319559})
    assert from_json(ServerTime, text) == ServerTime(server_time=1499827319559)


def test_invalid_json_text():
    with pytest.raises(ModelError):
        from_json(ServerTime, "{not json")


def test_missing_field_raises():
    with pytest.raises(ModelError, match="serverTime"):
        from_json(ServerTime, {})


def test_wrong_type_raises():
    with pytest.raises(ModelError):
        from_json(ServerTime, {"serverTime": "1499827319559"})


def test_negative_unsigned_raises():
    with pytest.raises(ModelError):
        from_json(ServerTime, {"serverTime": -1})


def test_unknown_fields_ignored():
    result = from_json(SymbolPrice, {"symbol": "LTCBTC", "price": "4.00000200", "extra": 1})
    assert result == SymbolPrice(symbol="LTCBTC", price=4.000002)


def test_bids_from_sequence():
    bid = from_json(Bids, ["4.00000000", "431.00000000"])
    assert bid == Bids(price=4.0, qty=431.0)


def test_bids_sequence_wrong_length():
    with pytest.raises(ModelError):
        from_json(Bids, ["4.0", "431.0", "extra"])
    with pytest.raises(ModelError):
        from_json(Bids, ["4.0"])


def test_order_book():
    book = from_json(
        OrderBook,
        {
            "lastUpdateId": 1027024,
            "bids": [["4.00000000", "431.00000000"]],
            "asks": [["4.00000200", "12.00000000"]],
        },
    )
    assert book.last_update_id == 1027024
    assert book.bids == [Bids(price=4.0, qty=431.0)]
    assert book.asks[0].price == 4.000002
    assert book.asks[0].qty == 12.0


def test_transaction_defaults():
    txn = from_json(
        Transaction,
        {
            "symbol": "BTCUSDT",
            "orderId": 28,
            "clientOrderId": "6gCrw2kRUAF9CvJDGP16IP",
            "transactTime": 1507725176595,
            "price": "0.00000000",
            "origQty": "10.00000000",
            "executedQty": "10.00000000",
            "cummulativeQuoteQty": "10.00000000",
            "status": "FILLED",
            "timeInForce": "GTC",
            "type": "MARKET",
            "side": "SELL",
        },
    )
    assert txn.stop_price == 0.0
    assert txn.fills is None
    assert txn.order_list_id is None
    assert txn.type_name == "MARKET"
    assert txn.orig_qty == 10.0


def test_transaction_with_fills():
    txn = from_json(
        Transaction,
        {
            "symbol": "BTCUSDT",
            "orderId": 28,
            "orderListId": -1,
            "clientOrderId": "abc",
            "transactTime": 1507725176595,
            "price": "0.0",
            "origQty": "10.0",
            "executedQty": "10.0",
            "cummulativeQuoteQty": "10.0",
            "stopPrice": "1.5",
            "status": "FILLED",
            "timeInForce": "GTC",
            "type": "MARKET",
            "side": "SELL",
            "fills": [
                {
                    "price": "4000.00000000",
                    "qty": "1.00000000",
                    "commission": "4.00000000",
                    "commissionAsset": "USDT",
                    "tradeId": 56,
                }
            ],
        },
    )
    assert txn.order_list_id == -1
    assert txn.stop_price == 1.5
    assert len(txn.fills) == 1
    assert txn.fills[0].price == 4000.0
    assert txn.fills[0].commission_asset == "USDT"
    assert txn.fills[0].trade_id == 56


def test_order_type_key():
    order = from_json(
        Order,
        {
            "symbol": "LTCBTC",
            "orderId": 1,
            "orderListId": -1,
            "clientOrderId": "myOrder1",
            "price": "0.1",
            "origQty": "1.0",
            "executedQty": "0.0",
            "cummulativeQuoteQty": "0.0",
            "status": "NEW",
            "timeInForce": "GTC",
            "type": "LIMIT",
            "side": "BUY",
            "stopPrice": "0.0",
            "icebergQty": "0.0",
            "time": 1499827319559,
            "updateTime": 1499827319559,
            "isWorking": True,
            "origQuoteOrderQty": "0.000000",
        },
    )
    assert order.type_name == "LIMIT"
    assert order.price == 0.1
    assert order.is_working is True


def test_order_canceled_optional_null():
    result = from_json(OrderCanceled, {"symbol": "LTCBTC", "orderId": None})
    assert result == OrderCanceled(symbol="LTCBTC")


def test_agg_trade_keys():
    trade = from_json(
        AggTrade,
        {
            "a": 26129,
            "p": "0.01633102",
            "q": "4.70443515",
            "f": 27781,
            "l": 27781,
            "T": 1498793709153,
            "m": True,
            "M": True,
        },
    )
    assert trade.agg_id == 26129
    assert trade.first_id == trade.last_id == 27781
    assert trade.time == 1498793709153
    assert trade.maker and trade.best_match
    assert trade.qty == 4.70443515


def test_parse_filter_dispatch():
    assert parse_filter(
        {"filterType": "PRICE_FILTER", "minPrice": "0.01", "maxPrice": "100", "tickSize": "0.01"}
    ) == PriceFilter(min_price="0.01", max_price="100", tick_size="0.01")
    assert parse_filter({"filterType": "MIN_NOTIONAL", "minNotional": "10"}) == MinNotional(
        min_notional="10"
    )
    assert parse_filter({"filterType": "TRAILING_DELTA"}) == TrailingDelta()


def test_parse_filter_errors():
    with pytest.raises(ModelError):
        parse_filter({"filterType": "NOT_A_FILTER"})
    with pytest.raises(ModelError):
        parse_filter({"minPrice": "0.01"})


def test_exchange_information():
    info = from_json(
        ExchangeInformation,
        {
            "timezone": "UTC",
            "serverTime": 1565246363776,
            "rateLimits": [
                {
                    "rateLimitType": "REQUEST_WEIGHT",
                    "interval": "MINUTE",
                    "intervalNum": 1,
                    "limit": 1200,
                }
            ],
            "symbols": [
                {
                    "symbol": "ETHBTC",
                    "status": "TRADING",
                    "baseAsset": "ETH",
                    "baseAssetPrecision": 8,
                    "quoteAsset": "BTC",
                    "quotePrecision": 8,
                    "orderTypes": ["LIMIT", "MARKET"],
                    "icebergAllowed": True,
                    "isSpotTradingAllowed": True,
                    "isMarginTradingAllowed": False,
                    "filters": [
                        {
                            "filterType": "LOT_SIZE",
                            "minQty": "0.001",
                            "maxQty": "100000",
                            "stepSize": "0.001",
                        }
                    ],
                }
            ],
        },
    )
    assert info.rate_limits[0].limit == 1200
    symbol = info.symbols[0]
    assert symbol.order_types == ["LIMIT", "MARKET"]
    assert symbol.filters == [LotSize(min_qty="0.001", max_qty="100000", step_size="0.001")]
    assert symbol.is_margin_trading_allowed is False


def test_account_information():
    account = from_json(
        AccountInformation,
        {
            "makerCommission": 15,
            "takerCommission": 15,
            "buyerCommission": 0,
            "sellerCommission": 0,
            "canTrade": True,
            "canWithdraw": True,
            "canDeposit": True,
            "balances": [{"asset": "BTC", "free": "4723846.89208129", "locked": "0.00000000"}],
        },
    )
    assert account.maker_commission == 15.0
    assert account.balances[0].free == "4723846.89208129"


def test_coin_info_with_network():
    coin = from_json(
        CoinInfo,
        {
            "coin": "BTC",
            "depositAllEnable": True,
            "free": "0.08074558",
            "freeze": "0.00000000",
            "ipoable": "0.00000000",
            "ipoing": "0.00000000",
            "isLegalMoney": False,
            "locked": "0.00000000",
            "name": "Bitcoin",
            "networkList": [
                {
                    "addressRegex": "^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$",
                    "coin": "BTC",
                    "depositEnable": True,
                    "isDefault": True,
                    "memoRegex": "",
                    "minConfirm": 1,
                    "name": "BTC",
                    "network": "BTC",
                    "resetAddressStatus": False,
                    "unLockConfirm": 2,
                    "withdrawEnable": True,
                    "withdrawFee": "0.00050000",
                    "withdrawMin": "0.00100000",
                }
            ],
            "storage": "0.00000000",
            "trading": True,
            "withdrawAllEnable": True,
            "withdrawing": "0.00000000",
        },
    )
    assert coin.free == 0.08074558
    network = coin.network_list[0]
    assert network.un_lock_confirm == 2
    assert network.deposit_desc is None
    assert network.withdraw_fee == 0.0005


def test_asset_detail_optional_tip():
    detail = from_json(
        AssetDetail,
        {
            "minWithdrawAmount": "0.10000000",
            "depositStatus": True,
            "withdrawFee": 0.01,
            "withdrawStatus": True,
        },
    )
    assert detail.min_withdraw_amount == 0.1
    assert detail.withdraw_fee == 0.01
    assert detail.deposit_tip is None


def test_kline_from_row():
    kline = KlineSummary.from_row(KLINE_ROW)
    assert kline.open_time == 1499040000000
    assert kline.open == "0.01634790"
    assert kline.close_time == 1499644799999
    assert kline.number_of_trades == 308
    assert kline.taker_buy_quote_asset_volume == "28.46694368"


def test_kline_from_row_missing_value():
    with pytest.raises(KlineValueMissingError) as info:
        KlineSummary.from_row(KLINE_ROW[:5])
    assert info.value.index == 5
    assert info.value.name == "volume"


def test_kline_from_row_wrong_type():
    row = list(KLINE_ROW)
    row[1] = 0.0163479
    with pytest.raises(ModelError):
        KlineSummary.from_row(row)


def test_kline_from_dict_uses_snake_keys():
    names = [
        "open_time",
        "open",
        "high",
        "low",
        "close",
        "volume",
        "close_time",
        "quote_asset_volume",
        "number_of_trades",
        "taker_buy_base_asset_volume",
        "taker_buy_quote_asset_volume",
    ]
    data = dict(zip(names, KLINE_ROW))
    assert from_json(KlineSummary, data) == KlineSummary.from_row(KLINE_ROW)


def test_from_json_rejects_non_model():
    with pytest.raises(TypeError):
        from_json(dict, {})