"""
舊版現貨行情（v1/v2）與現貨私有頻道的響應模型

v1 信封為 {symbol, symbolName, topic, params, data: [...], f, sendTime}，
v2 信封為 {topic, params, data}，data 是單個對象；
私有頻道直接推送事件數組。心跳為 {"ping": ms} / {"pong": ms}。

舊版合約頻道共用的 op 響應（pong / 訂閱確認）也定義在這裡。
"""
from typing import Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, RootModel, StrictBool, StrictInt, StrictStr

from .responses import CAMEL_CONFIG, WIRE_CONFIG, ResponseDecoder

ParamsT = TypeVar("ParamsT")
DataT = TypeVar("DataT")


class Ping(BaseModel):
    model_config = WIRE_CONFIG

    ping: StrictInt


class Pong(BaseModel):
    model_config = WIRE_CONFIG

    pong: StrictInt


class LegacyOpRequest(BaseModel):
    model_config = WIRE_CONFIG

    op: StrictStr
    args: Optional[List[StrictStr]] = None


class LegacyOpResponse(BaseModel):
    """舊版合約頻道的 pong / 訂閱確認 / 認證響應"""
    model_config = WIRE_CONFIG

    success: StrictBool
    ret_msg: StrictStr
    conn_id: StrictStr
    request: LegacyOpRequest


class CommonParams(BaseModel):
    model_config = CAMEL_CONFIG

    binary: StrictStr
    realtime_interval: StrictStr


class KlineParams(BaseModel):
    model_config = CAMEL_CONFIG

    binary: StrictStr
    realtime_interval: StrictStr
    kline_type: StrictStr


class MergedDepthParams(BaseModel):
    model_config = CAMEL_CONFIG

    binary: StrictStr
    realtime_interval: StrictStr
    dump_scale: StrictStr


class LegacyResponse(BaseModel, Generic[ParamsT, DataT]):
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    symbol_name: StrictStr
    topic: StrictStr
    params: ParamsT
    data: List[DataT]
    # 是否為首條（全量）消息
    f: StrictBool
    send_time: StrictInt


class LegacyTrade(BaseModel):
    model_config = WIRE_CONFIG

    # 成交 ID
    v: StrictStr
    t: StrictInt
    p: StrictStr
    q: StrictStr
    # True 表示買方為 taker
    m: StrictBool


class Realtimes(BaseModel):
    """24 小時行情"""
    model_config = WIRE_CONFIG

    t: StrictInt
    s: StrictStr
    c: StrictStr
    h: StrictStr
    l: StrictStr
    o: StrictStr
    v: StrictStr
    qv: StrictStr
    # 漲跌幅
    m: StrictStr


class LegacyKline(BaseModel):
    model_config = WIRE_CONFIG

    t: StrictInt
    s: StrictStr
    sn: StrictStr
    c: StrictStr
    h: StrictStr
    l: StrictStr
    o: StrictStr
    v: StrictStr


# (price, quantity)
DepthItem = Tuple[StrictStr, StrictStr]


class Depth(BaseModel):
    model_config = WIRE_CONFIG

    t: StrictInt
    s: StrictStr
    v: StrictStr
    b: List[DepthItem]
    a: List[DepthItem]


class DiffDepth(BaseModel):
    model_config = WIRE_CONFIG

    t: StrictInt
    v: StrictStr
    b: List[DepthItem]
    a: List[DepthItem]


class LeveragedTokenNav(BaseModel):
    """槓桿代幣淨值，交易對需帶 NAV 後綴"""
    model_config = WIRE_CONFIG

    t: StrictInt
    s: StrictStr
    nav: StrictStr
    b: StrictStr
    l: StrictStr
    loan: StrictStr
    ti: StrictStr
    n: StrictStr


class LegacyTradeResponse(LegacyResponse[CommonParams, LegacyTrade]):
    pass


class RealtimesResponse(LegacyResponse[CommonParams, Realtimes]):
    pass


class LegacyKlineResponse(LegacyResponse[KlineParams, LegacyKline]):
    pass


class DepthResponse(LegacyResponse[CommonParams, Depth]):
    pass


class MergedDepthResponse(LegacyResponse[MergedDepthParams, Depth]):
    pass


class DiffDepthResponse(LegacyResponse[CommonParams, DiffDepth]):
    pass


class LeveragedTokenResponse(LegacyResponse[CommonParams, LeveragedTokenNav]):
    pass


# 合併深度的消息同樣符合 DepthResponse 的結構，因此總是解碼為 DepthResponse
LEGACY_SPOT_VARIANTS = (
    LegacyTradeResponse,
    RealtimesResponse,
    LegacyKlineResponse,
    DepthResponse,
    MergedDepthResponse,
    DiffDepthResponse,
    LeveragedTokenResponse,
    Pong,
    Ping,
)

LegacySpotResponse = Union[LEGACY_SPOT_VARIANTS]

LEGACY_SPOT_DECODER: ResponseDecoder = ResponseDecoder("legacy_spot", LEGACY_SPOT_VARIANTS)


# ==================== 現貨 v2 ====================

class CommonParamsV2(BaseModel):
    model_config = CAMEL_CONFIG

    binary: StrictStr
    symbol: StrictStr
    symbol_name: StrictStr


class KlineParamsV2(BaseModel):
    model_config = CAMEL_CONFIG

    binary: StrictStr
    symbol: StrictStr
    symbol_name: StrictStr
    kline_type: StrictStr


class BookTicker(BaseModel):
    """最優買賣價"""
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    bid_price: StrictStr
    bid_qty: StrictStr
    ask_price: StrictStr
    ask_qty: StrictStr
    # 訂單簿最後更新時間
    time: StrictInt


class LegacyResponseV2(BaseModel, Generic[ParamsT, DataT]):
    model_config = WIRE_CONFIG

    topic: StrictStr
    params: ParamsT
    data: DataT


class DepthV2Response(LegacyResponseV2[CommonParamsV2, Depth]):
    pass


class KlineV2Response(LegacyResponseV2[KlineParamsV2, LegacyKline]):
    pass


class TradeV2Response(LegacyResponseV2[CommonParamsV2, LegacyTrade]):
    pass


class BookTickerV2Response(LegacyResponseV2[CommonParamsV2, BookTicker]):
    pass


class RealtimesV2Response(LegacyResponseV2[CommonParamsV2, Realtimes]):
    pass


LEGACY_SPOT_V2_VARIANTS = (
    DepthV2Response,
    KlineV2Response,
    TradeV2Response,
    BookTickerV2Response,
    RealtimesV2Response,
    Pong,
    Ping,
)

LegacySpotV2Response = Union[LEGACY_SPOT_V2_VARIANTS]

LEGACY_SPOT_V2_DECODER: ResponseDecoder = ResponseDecoder("legacy_spot_v2", LEGACY_SPOT_V2_VARIANTS)


# ==================== 現貨私有頻道 ====================

class WalletBalanceChange(BaseModel):
    model_config = WIRE_CONFIG

    # 幣種
    a: StrictStr
    # 可用餘額
    f: StrictStr
    # 下單凍結
    l: StrictStr


class OutboundAccountInfo(BaseModel):
    """賬戶餘額變動"""
    model_config = WIRE_CONFIG

    e: StrictStr
    E: StrictStr
    # 允許交易 / 提幣 / 充值
    T: StrictBool
    W: StrictBool
    D: StrictBool
    B: List[WalletBalanceChange]


class ExecutionReport(BaseModel):
    """訂單更新"""
    model_config = WIRE_CONFIG

    e: StrictStr
    E: StrictStr
    s: StrictStr
    # 用戶自定義訂單 ID
    c: StrictStr
    # BUY / SELL
    S: StrictStr
    # LIMIT / MARKET_OF_QUOTE / MARKET_OF_BASE
    o: StrictStr
    f: StrictStr
    q: StrictStr
    p: StrictStr
    X: StrictStr
    i: StrictStr
    # 對手方訂單 ID
    M: StrictStr
    l: StrictStr
    z: StrictStr
    L: StrictStr
    n: StrictStr
    N: StrictStr
    # False 表示自成交
    u: StrictBool
    w: StrictBool
    # 是否為 LIMIT_MAKER
    m: StrictBool
    O: StrictStr
    Z: StrictStr
    A: StrictStr
    C: StrictBool
    # 槓桿
    v: StrictStr


class TicketInfo(BaseModel):
    """成交回報"""
    model_config = WIRE_CONFIG

    e: StrictStr
    E: StrictStr
    s: StrictStr
    q: StrictStr
    t: StrictStr
    p: StrictStr
    T: StrictStr
    o: StrictStr
    c: StrictStr
    O: StrictStr
    a: StrictStr
    A: StrictStr
    # True 為 maker
    m: StrictBool


class OutboundAccountInfoSequence(RootModel[List[OutboundAccountInfo]]):
    pass


class ExecutionReportSequence(RootModel[List[ExecutionReport]]):
    pass


class TicketInfoSequence(RootModel[List[TicketInfo]]):
    pass


# 空數組總是解碼為 OutboundAccountInfoSequence
LEGACY_SPOT_PRIVATE_VARIANTS = (
    OutboundAccountInfoSequence,
    ExecutionReportSequence,
    TicketInfoSequence,
    Pong,
    Ping,
)

LegacySpotPrivateResponse = Union[LEGACY_SPOT_PRIVATE_VARIANTS]

LEGACY_SPOT_PRIVATE_DECODER: ResponseDecoder = ResponseDecoder(
    "legacy_spot_private", LEGACY_SPOT_PRIVATE_VARIANTS
)
