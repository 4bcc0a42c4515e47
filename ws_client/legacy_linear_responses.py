"""
舊版 USDT 永續（realtime_public / realtime_private）的響應模型

公共消息有三種信封：
    - {topic, type, data, cross_seq, timestamp_e6}：訂單簿、合約信息
    - {topic, data}：成交、強平
    - {topic, data, timestamp_e6}：K線
私有消息為 {topic, data: [...]}，倉位和訂單另帶 action。
pong 與訂閱確認解碼為 LegacyOpResponse。
"""
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .legacy_responses import LegacyOpResponse
from .responses import WIRE_CONFIG, ResponseDecoder

DataT = TypeVar("DataT")


# ==================== 信封 ====================

class Response(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    # snapshot / delta
    res_type: StrictStr = Field(alias="type")
    data: DataT
    cross_seq: StrictStr
    timestamp_e6: StrictStr


class BaseResponse(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    data: DataT


class BaseResponseWithTimestamp(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    data: DataT
    timestamp_e6: StrictInt


class BasePrivateResponse(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    data: List[DataT]


class BasePrivateResponseWithAction(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    action: StrictStr
    data: List[DataT]


# ==================== 公共數據 ====================

class OrderBookItem(BaseModel):
    model_config = WIRE_CONFIG

    price: StrictStr
    symbol: StrictStr
    id: StrictStr
    side: StrictStr
    size: StrictFloat


class OrderBookDeleteItem(BaseModel):
    model_config = WIRE_CONFIG

    price: StrictStr
    symbol: StrictStr
    id: StrictStr
    side: StrictStr


class OrderBookSnapshot(BaseModel):
    model_config = WIRE_CONFIG

    order_book: List[OrderBookItem]


class OrderBookDelta(BaseModel):
    model_config = WIRE_CONFIG

    delete: List[OrderBookDeleteItem]
    update: List[OrderBookItem]
    insert: List[OrderBookItem]


class Trade(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    tick_direction: StrictStr
    price: StrictStr
    size: StrictFloat
    # UTC 時間
    timestamp: StrictStr
    trade_time_ms: StrictStr
    # taker 方向
    side: StrictStr
    trade_id: StrictStr


class InstrumentInfoSnapshot(BaseModel):
    """
    合約信息全量

    *_e4 / *_e6 / *_e8 字段為放大後的整數字符串，帶 e4 的價格字段已廢棄。
    """
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    last_price_e4: StrictStr
    last_price: StrictStr
    bid1_price_e4: StrictStr
    bid1_price: StrictStr
    ask1_price_e4: StrictStr
    ask1_price: StrictStr
    last_tick_direction: StrictStr
    prev_price_24h_e4: StrictStr
    prev_price_24h: StrictStr
    price_24h_pcnt_e6: StrictStr
    high_price_24h_e4: StrictStr
    high_price_24h: StrictStr
    low_price_24h_e4: StrictStr
    low_price_24h: StrictStr
    prev_price_1h_e4: StrictStr
    prev_price_1h: StrictStr
    price_1h_pcnt_e6: StrictStr
    mark_price_e4: StrictStr
    mark_price: StrictStr
    index_price_e4: StrictStr
    index_price: StrictStr
    open_interest_e8: StrictStr
    total_turnover_e8: StrictStr
    turnover_24h_e8: StrictStr
    total_volume_e8: StrictStr
    volume_24h_e8: StrictStr
    funding_rate_e6: StrictStr
    predicted_funding_rate_e6: StrictStr
    cross_seq: StrictStr
    created_at: StrictStr
    updated_at: StrictStr
    next_funding_time: StrictStr
    count_down_hour: StrictStr
    # 資金費率結算間隔（小時）
    funding_rate_interval: StrictStr
    settle_time_e9: StrictStr
    delisting_status: StrictStr


class InstrumentInfoDeltaItem(BaseModel):
    """合約信息增量，只有變化的字段出現"""
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    last_price_e4: Optional[StrictStr] = None
    last_price: Optional[StrictStr] = None
    bid1_price_e4: Optional[StrictStr] = None
    bid1_price: Optional[StrictStr] = None
    ask1_price_e4: Optional[StrictStr] = None
    ask1_price: Optional[StrictStr] = None
    last_tick_direction: Optional[StrictStr] = None
    prev_price_24h_e4: Optional[StrictStr] = None
    prev_price_24h: Optional[StrictStr] = None
    price_24h_pcnt_e6: Optional[StrictStr] = None
    high_price_24h_e4: Optional[StrictStr] = None
    high_price_24h: Optional[StrictStr] = None
    low_price_24h_e4: Optional[StrictStr] = None
    low_price_24h: Optional[StrictStr] = None
    prev_price_1h_e4: Optional[StrictStr] = None
    prev_price_1h: Optional[StrictStr] = None
    price_1h_pcnt_e6: Optional[StrictStr] = None
    mark_price_e4: Optional[StrictStr] = None
    mark_price: Optional[StrictStr] = None
    index_price_e4: Optional[StrictStr] = None
    index_price: Optional[StrictStr] = None
    open_interest_e8: Optional[StrictStr] = None
    total_turnover_e8: Optional[StrictStr] = None
    turnover_24h_e8: Optional[StrictStr] = None
    total_volume_e8: Optional[StrictStr] = None
    volume_24h_e8: Optional[StrictStr] = None
    funding_rate_e6: Optional[StrictStr] = None
    predicted_funding_rate_e6: Optional[StrictStr] = None
    next_funding_time: Optional[StrictStr] = None
    count_down_hour: Optional[StrictStr] = None
    funding_rate_interval: Optional[StrictStr] = None
    settle_time_e9: Optional[StrictStr] = None
    delisting_status: Optional[StrictStr] = None
    cross_seq: StrictStr
    created_at: StrictStr
    updated_at: StrictStr


class InstrumentInfoDelta(BaseModel):
    model_config = WIRE_CONFIG

    update: List[InstrumentInfoDeltaItem]


class Kline(BaseModel):
    model_config = WIRE_CONFIG

    # 起止時間（秒）
    start: StrictInt
    end: StrictInt
    open: StrictFloat
    close: StrictFloat
    high: StrictFloat
    low: StrictFloat
    volume: StrictStr
    turnover: StrictStr
    confirm: StrictBool
    cross_seq: StrictInt
    timestamp: StrictInt


class Liquidation(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    side: StrictStr
    # 破產價格
    price: StrictStr
    qty: StrictStr
    time: StrictInt


class OrderBookL2SnapshotResponse(Response[OrderBookSnapshot]):
    pass


class OrderBookL2DeltaResponse(Response[OrderBookDelta]):
    pass


class TradeResponse(BaseResponse[List[Trade]]):
    pass


class InstrumentInfoSnapshotResponse(Response[InstrumentInfoSnapshot]):
    pass


class InstrumentInfoDeltaResponse(Response[InstrumentInfoDelta]):
    pass


class KlineResponse(BaseResponseWithTimestamp[List[Kline]]):
    pass


class LiquidationResponse(BaseResponse[Liquidation]):
    pass


# data 為空列表時總是解碼為 TradeResponse
LEGACY_LINEAR_PUBLIC_VARIANTS = (
    OrderBookL2SnapshotResponse,
    OrderBookL2DeltaResponse,
    TradeResponse,
    InstrumentInfoSnapshotResponse,
    InstrumentInfoDeltaResponse,
    KlineResponse,
    LiquidationResponse,
    LegacyOpResponse,
)

LegacyLinearPublicResponse = Union[LEGACY_LINEAR_PUBLIC_VARIANTS]

LEGACY_LINEAR_PUBLIC_DECODER: ResponseDecoder = ResponseDecoder(
    "legacy_linear_public", LEGACY_LINEAR_PUBLIC_VARIANTS
)


# ==================== 私有數據 ====================

class Position(BaseModel):
    model_config = WIRE_CONFIG

    user_id: StrictStr
    symbol: StrictStr
    size: StrictFloat
    side: StrictStr
    position_value: StrictFloat
    entry_price: StrictFloat
    liq_price: StrictFloat
    bust_price: StrictFloat
    leverage: StrictFloat
    order_margin: StrictFloat
    position_margin: StrictFloat
    occ_closing_fee: StrictFloat
    take_profit: StrictFloat
    tp_trigger_by: StrictStr
    stop_loss: StrictFloat
    sl_trigger_by: StrictStr
    trailing_stop: StrictFloat
    realised_pnl: StrictFloat
    auto_add_margin: StrictStr
    cum_realised_pnl: StrictFloat
    # Normal / Liq / Adl
    position_status: StrictStr
    position_id: StrictStr
    position_seq: StrictStr
    adl_rank_indicator: StrictStr
    free_qty: StrictFloat
    # Full / Partial
    tp_sl_mode: StrictStr
    # 0 單向持倉，1 雙向持倉買方，2 雙向持倉賣方
    position_idx: StrictStr
    # MergedSingle / BothSide
    mode: StrictStr
    isolated: StrictBool
    risk_id: StrictStr


class Execution(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    side: StrictStr
    order_id: StrictStr
    exec_id: StrictStr
    order_link_id: StrictStr
    price: StrictFloat
    order_qty: StrictFloat
    exec_type: StrictStr
    exec_qty: StrictFloat
    exec_fee: StrictFloat
    leaves_qty: StrictFloat
    is_maker: StrictBool
    trade_time: StrictStr


class Order(BaseModel):
    model_config = WIRE_CONFIG

    order_id: StrictStr
    order_link_id: StrictStr
    symbol: StrictStr
    side: StrictStr
    order_type: StrictStr
    price: StrictFloat
    qty: StrictFloat
    leaves_qty: StrictFloat
    time_in_force: StrictStr
    create_type: StrictStr
    cancel_type: StrictStr
    take_profit: StrictFloat
    stop_loss: StrictFloat
    trailing_stop: StrictFloat
    order_status: StrictStr
    last_exec_price: StrictFloat
    cum_exec_qty: StrictFloat
    cum_exec_value: StrictFloat
    cum_exec_fee: StrictFloat
    reduce_only: StrictBool
    close_on_trigger: StrictBool
    position_idx: StrictStr
    create_time: StrictStr
    update_time: StrictStr


class StopOrder(BaseModel):
    model_config = WIRE_CONFIG

    stop_order_id: StrictStr
    order_link_id: StrictStr
    user_id: StrictStr
    symbol: StrictStr
    side: StrictStr
    order_type: StrictStr
    price: StrictFloat
    qty: StrictFloat
    time_in_force: StrictStr
    create_type: StrictStr
    cancel_type: StrictStr
    order_status: StrictStr
    stop_order_type: StrictStr
    tp_trigger_by: StrictStr
    # TrailingProfit 時為追蹤止盈的激活價
    trigger_price: StrictFloat
    reduce_only: StrictBool
    close_on_trigger: StrictBool
    position_idx: StrictStr
    create_time: StrictStr
    update_time: StrictStr


class Wallet(BaseModel):
    model_config = WIRE_CONFIG

    wallet_balance: StrictFloat
    available_balance: StrictFloat


class PositionResponse(BasePrivateResponseWithAction[Position]):
    pass


class ExecutionResponse(BasePrivateResponse[Execution]):
    pass


class OrderResponse(BasePrivateResponseWithAction[Order]):
    pass


class StopOrderResponse(BasePrivateResponse[StopOrder]):
    pass


class WalletResponse(BasePrivateResponse[Wallet]):
    pass


LEGACY_LINEAR_PRIVATE_VARIANTS = (
    PositionResponse,
    ExecutionResponse,
    OrderResponse,
    StopOrderResponse,
    WalletResponse,
    LegacyOpResponse,
)

LegacyLinearPrivateResponse = Union[LEGACY_LINEAR_PRIVATE_VARIANTS]

LEGACY_LINEAR_PRIVATE_DECODER: ResponseDecoder = ResponseDecoder(
    "legacy_linear_private", LEGACY_LINEAR_PRIVATE_VARIANTS
)
