"""
舊版反向合約（realtime）的響應模型

與 USDT 永續的舊版模型相比，數值字段多為 JSON 整數，方向和訂單狀態為枚舉。
部分價格字段既可能是數字也可能是數字字符串，這些字段使用寬鬆的 float。
"""
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import AliasChoices, BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .legacy_linear_responses import BaseResponse, BaseResponseWithTimestamp
from .legacy_responses import LegacyOpResponse
from .responses import WIRE_CONFIG, ResponseDecoder

DataT = TypeVar("DataT")


class OrderSide(str, Enum):
    BUY = "Buy"
    SELL = "Sell"


class PositionSide(str, Enum):
    BUY = "Buy"
    SELL = "Sell"
    NONE = "None"


class OrderStatus(str, Enum):
    # 已被系統接收，尚未進入撮合
    CREATED = "Created"
    NEW = "New"
    REJECTED = "Rejected"
    PARTIALLY_FILLED = "PartiallyFilled"
    FILLED = "Filled"
    PENDING_CANCEL = "PendingCancel"
    CANCELLED = "Cancelled"
    # 以下僅適用於條件單
    UNTRIGGERED = "Untriggered"
    DEACTIVATED = "Deactivated"
    TRIGGERED = "Triggered"
    ACTIVE = "Active"


# ==================== 信封 ====================

class Response(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    res_type: StrictStr = Field(alias="type")
    data: DataT
    cross_seq: StrictInt
    timestamp_e6: StrictInt


class BasePrivateResponse(BaseModel, Generic[DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    data: List[DataT]


# ==================== 公共數據 ====================

class OrderBookItem(BaseModel):
    model_config = WIRE_CONFIG

    price: float
    symbol: StrictStr
    id: StrictInt
    side: OrderSide
    size: StrictInt


class OrderBookDeleteItem(BaseModel):
    model_config = WIRE_CONFIG

    price: StrictStr
    symbol: StrictStr
    id: StrictInt
    side: OrderSide


class OrderBookDelta(BaseModel):
    model_config = WIRE_CONFIG

    delete: List[OrderBookDeleteItem]
    update: List[OrderBookItem]
    insert: List[OrderBookItem]


class Trade(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    tick_direction: StrictStr
    price: StrictFloat
    size: StrictInt
    timestamp: StrictStr
    trade_time_ms: StrictInt
    side: OrderSide
    trade_id: StrictStr


class Insurance(BaseModel):
    model_config = WIRE_CONFIG

    currency: StrictStr
    timestamp: StrictStr
    wallet_balance: StrictInt


class PerpetualInstrumentInfoSnapshot(BaseModel):
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    last_price_e4: StrictInt
    last_price: StrictStr
    bid1_price_e4: StrictInt
    bid1_price: StrictStr
    ask1_price_e4: StrictInt
    ask1_price: StrictStr
    last_tick_direction: StrictStr
    prev_price_24h_e4: StrictInt
    prev_price_24h: StrictStr
    price_24h_pcnt_e6: StrictInt
    high_price_24h_e4: StrictInt
    high_price_24h: StrictStr
    low_price_24h_e4: StrictInt
    low_price_24h: StrictStr
    prev_price_1h_e4: StrictInt
    prev_price_1h: StrictStr
    price_1h_pcnt_e6: StrictInt
    mark_price_e4: StrictInt
    mark_price: StrictStr
    index_price_e4: StrictInt
    index_price: StrictStr
    open_interest: StrictInt
    open_value_e8: StrictInt
    total_turnover_e8: StrictInt
    turnover_24h_e8: StrictInt
    total_volume: StrictInt
    volume_24h: StrictInt
    funding_rate_e6: StrictInt
    predicted_funding_rate_e6: StrictInt
    cross_seq: StrictInt
    created_at: StrictStr
    updated_at: StrictStr
    next_funding_time: StrictStr
    countdown_hour: StrictInt
    funding_rate_interval: StrictInt
    settle_time_e9: StrictInt
    delisting_status: StrictStr


class PerpetualInstrumentInfoDeltaItem(BaseModel):
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    last_tick_direction: Optional[StrictStr] = None
    last_price_e4: Optional[StrictInt] = None
    last_price: Optional[StrictStr] = None
    bid1_price_e4: Optional[StrictInt] = None
    bid1_price: Optional[StrictStr] = None
    ask1_price_e4: Optional[StrictInt] = None
    ask1_price: Optional[StrictStr] = None
    price_24h_pcnt_e6: Optional[StrictInt] = None
    price_1h_pcnt_e6: Optional[StrictInt] = None
    mark_price_e4: Optional[StrictInt] = None
    mark_price: Optional[StrictStr] = None
    total_turnover_e8: Optional[StrictInt] = None
    turnover_24h_e8: Optional[StrictInt] = None
    total_volume: Optional[StrictInt] = None
    volume_24h: Optional[StrictInt] = None
    cross_seq: StrictInt
    created_at: StrictStr
    updated_at: StrictStr


class PerpetualInstrumentInfoDelta(BaseModel):
    model_config = WIRE_CONFIG

    delete: List[PerpetualInstrumentInfoDeltaItem]
    update: List[PerpetualInstrumentInfoDeltaItem]
    insert: List[PerpetualInstrumentInfoDeltaItem]


class FuturesInstrumentInfoSnapshot(BaseModel):
    """交割合約信息全量"""
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    symbol_name: StrictStr
    symbol_year: StrictInt
    contract_type: StrictStr
    coin: StrictStr
    quote_symbol: StrictStr
    # 0 單向持倉，3 雙向持倉
    mode: StrictStr
    is_up_borrowable: StrictInt
    import_time_e9: StrictInt
    start_trading_time_e9: StrictInt
    # 距離交割的秒數
    time_to_settle: StrictInt
    settle_time_e9: StrictInt
    settle_fee_rate_e8: StrictInt
    contract_status: StrictStr
    system_subsidy_e8: StrictInt
    last_price_e4: StrictInt
    last_price: StrictStr
    last_tick_direction: StrictStr
    bid1_price_e4: StrictInt
    bid1_price: StrictStr
    ask1_price_e4: StrictInt
    ask1_price: StrictStr
    prev_price_24h_e4: StrictInt
    prev_price_24h: StrictStr
    price_24h_pcnt_e6: StrictInt
    high_price_24h_e4: StrictInt
    high_price_24h: StrictStr
    low_price_24h_e4: StrictInt
    low_price_24h: StrictStr
    prev_price_1h_e4: StrictInt
    prev_price_1h: StrictStr
    price_1h_pcnt_e6: StrictInt
    mark_price_e4: StrictInt
    mark_price: StrictStr
    index_price_e4: StrictInt
    index_price: StrictStr
    open_interest: StrictInt
    open_value_e8: StrictInt
    total_turnover_e8: StrictInt
    turnover_24h_e8: StrictInt
    fair_basis_e8: StrictInt
    fair_basis_rate_e8: StrictInt
    basis_in_year_e8: StrictInt
    expect_price_e4: StrictInt
    total_volume: StrictInt
    volume_24h: StrictInt
    cross_seq: StrictInt
    created_at_e9: StrictInt
    updated_at_e9: StrictInt


class FuturesInstrumentInfoDeltaItem(BaseModel):
    model_config = WIRE_CONFIG

    id: StrictInt
    symbol: StrictStr
    symbol_name: StrictStr
    symbol_year: StrictInt
    contract_type: StrictStr
    coin: StrictStr
    quote_symbol: StrictStr
    mode: StrictStr
    start_trading_time_e9: StrictInt
    time_to_settle: StrictInt
    settle_time_e9: StrictInt
    is_up_borrowable: Optional[StrictInt] = None
    settle_fee_rate_e8: Optional[StrictInt] = None
    import_time_e9: Optional[StrictInt] = None
    contract_status: Optional[StrictStr] = None
    system_subsidy_e8: Optional[StrictInt] = None
    last_price_e4: Optional[StrictInt] = None
    last_price: Optional[StrictStr] = None
    last_tick_direction: Optional[StrictStr] = None
    bid1_price_e4: Optional[StrictInt] = None
    bid1_price: Optional[StrictStr] = None
    ask1_price_e4: Optional[StrictInt] = None
    ask1_price: Optional[StrictStr] = None
    prev_price_24h_e4: Optional[StrictInt] = None
    prev_price_24h: Optional[StrictStr] = None
    price_24h_pcnt_e6: Optional[StrictInt] = None
    high_price_24h_e4: Optional[StrictInt] = None
    high_price_24h: Optional[StrictStr] = None
    low_price_24h_e4: Optional[StrictInt] = None
    low_price_24h: Optional[StrictStr] = None
    prev_price_1h_e4: Optional[StrictInt] = None
    prev_price_1h: Optional[StrictStr] = None
    price_1h_pcnt_e6: Optional[StrictInt] = None
    mark_price_e4: Optional[StrictInt] = None
    mark_price: Optional[StrictStr] = None
    index_price_e4: Optional[StrictInt] = None
    index_price: Optional[StrictStr] = None
    open_interest: Optional[StrictInt] = None
    open_value_e8: Optional[StrictInt] = None
    total_turnover_e8: Optional[StrictInt] = None
    turnover_24h_e8: Optional[StrictInt] = None
    fair_basis_e8: Optional[StrictInt] = None
    fair_basis_rate_e8: Optional[StrictInt] = None
    basis_in_year_e8: Optional[StrictInt] = None
    expect_price_e4: Optional[StrictInt] = None
    total_volume: Optional[StrictInt] = None
    volume_24h: Optional[StrictInt] = None
    cross_seq: Optional[StrictInt] = None
    created_at_e9: Optional[StrictInt] = None
    updated_at_e9: Optional[StrictInt] = None


class FuturesInstrumentInfoDelta(BaseModel):
    model_config = WIRE_CONFIG

    update: List[FuturesInstrumentInfoDeltaItem]


class Kline(BaseModel):
    model_config = WIRE_CONFIG

    start: StrictInt
    end: StrictInt
    open: StrictFloat
    close: StrictFloat
    high: StrictFloat
    low: StrictFloat
    volume: StrictFloat
    turnover: StrictFloat
    confirm: StrictBool
    cross_seq: StrictInt
    timestamp: StrictInt


class Liquidation(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    side: OrderSide
    price: StrictStr
    qty: StrictStr
    time: StrictInt


class OrderBookL2SnapshotResponse(BaseResponseWithTimestamp[List[OrderBookItem]]):
    pass


class OrderBookL2DeltaResponse(BaseResponseWithTimestamp[OrderBookDelta]):
    pass


class TradeResponse(BaseResponse[List[Trade]]):
    pass


class InsuranceResponse(BaseResponse[List[Insurance]]):
    pass


class PerpetualInstrumentInfoSnapshotResponse(Response[PerpetualInstrumentInfoSnapshot]):
    pass


class PerpetualInstrumentInfoDeltaResponse(Response[PerpetualInstrumentInfoDelta]):
    pass


class FuturesInstrumentInfoSnapshotResponse(Response[FuturesInstrumentInfoSnapshot]):
    pass


class FuturesInstrumentInfoDeltaResponse(Response[FuturesInstrumentInfoDelta]):
    pass


class KlineResponse(BaseResponseWithTimestamp[List[Kline]]):
    pass


class LiquidationResponse(BaseResponse[Liquidation]):
    pass


# 帶 timestamp_e6 且 data 為空列表的消息總是解碼為 OrderBookL2SnapshotResponse
LEGACY_INVERSE_PUBLIC_VARIANTS = (
    OrderBookL2SnapshotResponse,
    OrderBookL2DeltaResponse,
    TradeResponse,
    InsuranceResponse,
    PerpetualInstrumentInfoSnapshotResponse,
    PerpetualInstrumentInfoDeltaResponse,
    FuturesInstrumentInfoSnapshotResponse,
    FuturesInstrumentInfoDeltaResponse,
    KlineResponse,
    LiquidationResponse,
    LegacyOpResponse,
)

LegacyInversePublicResponse = Union[LEGACY_INVERSE_PUBLIC_VARIANTS]

LEGACY_INVERSE_PUBLIC_DECODER: ResponseDecoder = ResponseDecoder(
    "legacy_inverse_public", LEGACY_INVERSE_PUBLIC_VARIANTS
)


# ==================== 私有數據 ====================

class Position(BaseModel):
    model_config = WIRE_CONFIG

    user_id: StrictInt
    symbol: StrictStr
    size: StrictInt
    side: PositionSide
    position_value: StrictStr
    entry_price: StrictStr
    liq_price: StrictStr
    bust_price: StrictStr
    leverage: StrictStr
    order_margin: StrictStr
    position_margin: StrictStr
    available_balance: StrictStr
    take_profit: StrictStr
    stop_loss: StrictStr
    realised_pnl: StrictStr
    trailing_stop: StrictStr
    trailing_active: StrictStr
    wallet_balance: StrictStr
    risk_id: StrictInt
    occ_closing_fee: StrictStr
    occ_funding_fee: StrictStr
    auto_add_margin: StrictInt
    cum_realised_pnl: StrictStr
    position_status: StrictStr
    position_seq: StrictInt
    # 線上字段名可能是 Isolated
    isolated: StrictBool = Field(validation_alias=AliasChoices("isolated", "Isolated"))
    mode: StrictInt
    position_idx: StrictInt
    tp_sl_mode: StrictStr
    tp_order_num: StrictInt
    sl_order_num: StrictInt
    tp_free_size_x: StrictInt
    sl_free_size_x: StrictInt


class Execution(BaseModel):
    model_config = WIRE_CONFIG

    symbol: StrictStr
    side: OrderSide
    order_id: StrictStr
    exec_id: StrictStr
    order_link_id: StrictStr
    price: float
    order_qty: StrictInt
    exec_type: StrictStr
    exec_qty: StrictInt
    exec_fee: StrictStr
    leaves_qty: StrictInt
    is_maker: StrictBool
    trade_time: StrictStr


class Order(BaseModel):
    model_config = WIRE_CONFIG

    order_id: StrictStr
    order_link_id: StrictStr
    symbol: StrictStr
    side: OrderSide
    order_type: StrictStr
    price: float
    qty: StrictInt
    time_in_force: StrictStr
    create_type: StrictStr
    cancel_type: StrictStr
    order_status: OrderStatus
    leaves_qty: StrictInt
    cum_exec_qty: StrictInt
    cum_exec_value: StrictStr
    cum_exec_fee: StrictStr
    timestamp: StrictStr
    take_profit: StrictStr
    tp_trigger_by: Optional[StrictStr] = None
    stop_loss: StrictStr
    sl_trigger_by: Optional[StrictStr] = None
    trailing_stop: StrictStr
    last_exec_price: StrictStr
    reduce_only: StrictBool
    close_on_trigger: StrictBool


class StopOrder(BaseModel):
    model_config = WIRE_CONFIG

    order_id: StrictStr
    order_link_id: StrictStr
    user_id: StrictInt
    symbol: StrictStr
    order_type: StrictStr
    side: OrderSide
    price: StrictStr
    # 以 USD 計的數量
    qty: StrictInt
    time_in_force: StrictStr
    create_type: StrictStr
    cancel_type: StrictStr
    order_status: StrictStr
    stop_order_type: StrictStr
    trigger_by: StrictStr
    trigger_price: StrictStr
    close_on_trigger: StrictBool
    timestamp: StrictStr


class Wallet(BaseModel):
    model_config = WIRE_CONFIG

    user_id: StrictInt
    coin: StrictStr
    wallet_balance: float
    available_balance: float


class PositionResponse(BasePrivateResponse[Position]):
    pass


class ExecutionResponse(BasePrivateResponse[Execution]):
    pass


class OrderResponse(BasePrivateResponse[Order]):
    pass


class StopOrderResponse(BasePrivateResponse[StopOrder]):
    pass


class WalletResponse(BasePrivateResponse[Wallet]):
    pass


LEGACY_INVERSE_PRIVATE_VARIANTS = (
    PositionResponse,
    ExecutionResponse,
    OrderResponse,
    StopOrderResponse,
    WalletResponse,
    LegacyOpResponse,
)

LegacyInversePrivateResponse = Union[LEGACY_INVERSE_PRIVATE_VARIANTS]

LEGACY_INVERSE_PRIVATE_DECODER: ResponseDecoder = ResponseDecoder(
    "legacy_inverse_private", LEGACY_INVERSE_PRIVATE_VARIANTS
)
