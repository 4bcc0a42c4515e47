"""
V5 WebSocket 響應模型與無標籤解碼器

每個市場的響應是一組按固定順序排列的候選模型（變體），
解碼時依次嘗試，返回第一個在結構上匹配的變體：
    - 字段類型嚴格匹配（不會把 "1" 轉換成 1）
    - 未聲明的字段直接忽略
    - Optional 字段缺失時為 None

當一條消息同時符合多個變體時，總是得到聲明順序中靠前的那個。
例如 data 為空列表的公共消息在現貨市場會被解碼為 TradeResponse，
因為 Trade 排在 Kline 之前。
"""
import json
from typing import Generic, List, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError

from exceptions import WSDecodeError

DataT = TypeVar("DataT")
M = TypeVar("M", bound=BaseModel)


def to_camel(name: str) -> str:
    """snake_case → camelCase，數字後的字母保持原樣（high_price_24h → highPrice24h）"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


# 字段名與線上格式一致的模型
WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True)

# 線上格式為 camelCase 的模型
CAMEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# ==================== 控制消息 ====================

class OpResponse(BaseModel):
    """pong / 訂閱 / 認證 響應"""
    model_config = WIRE_CONFIG

    success: StrictBool
    ret_msg: StrictStr
    conn_id: StrictStr
    req_id: Optional[StrictStr] = None
    op: StrictStr


class OptionPongResponse(BaseModel):
    """期權公共頻道的 pong 響應"""
    model_config = WIRE_CONFIG

    args: Tuple[StrictStr]
    op: StrictStr


class OptionSubscriptionData(BaseModel):
    model_config = CAMEL_CONFIG

    fail_topics: List[StrictStr]
    success_topics: List[StrictStr]


class OptionSubscriptionResponse(BaseModel):
    """期權訂閱響應"""
    model_config = WIRE_CONFIG

    success: StrictBool
    conn_id: StrictStr
    data: OptionSubscriptionData
    type_: StrictStr = Field(alias="type")


class PrivatePongResponse(BaseModel):
    """私有頻道的 pong 響應"""
    model_config = WIRE_CONFIG

    req_id: Optional[StrictStr] = None
    op: StrictStr
    args: Tuple[StrictStr]
    conn_id: StrictStr


# ==================== 通用信封 ====================

class BasePublicResponse(BaseModel, Generic[DataT]):
    """公共頻道信封"""
    model_config = WIRE_CONFIG

    topic: StrictStr
    # snapshot / delta
    type_: StrictStr = Field(alias="type")
    # 系統生成數據的時間戳（毫秒）
    ts: StrictInt
    data: DataT


class BaseTickerPublicResponse(BaseModel, Generic[DataT]):
    """現貨/合約 ticker 信封，多一個 cross sequence"""
    model_config = WIRE_CONFIG

    topic: StrictStr
    type_: StrictStr = Field(alias="type")
    cs: StrictInt
    ts: StrictInt
    data: DataT


class BaseOptionPublicResponse(BaseModel, Generic[DataT]):
    """期權公共頻道信封"""
    model_config = WIRE_CONFIG

    id: StrictStr
    topic: StrictStr
    type_: StrictStr = Field(alias="type")
    ts: StrictInt
    data: DataT


class BasePrivateResponse(BaseModel, Generic[DataT]):
    """私有頻道信封"""
    model_config = CAMEL_CONFIG

    id: StrictStr
    topic: StrictStr
    creation_time: StrictInt
    data: DataT


# ==================== 公共數據 ====================

# (price, size)
OrderbookItem = Tuple[StrictStr, StrictStr]


class Orderbook(BaseModel):
    """訂單簿數據"""
    model_config = WIRE_CONFIG

    s: StrictStr
    # 快照中按價格降序
    b: List[OrderbookItem]
    # 快照中按價格升序
    a: List[OrderbookItem]
    # 更新 ID，u=1 表示服務重啟後的快照
    u: StrictInt
    # 期權沒有此字段
    seq: Optional[StrictInt] = None


class Trade(BaseModel):
    """成交數據"""
    model_config = WIRE_CONFIG

    T: StrictInt
    s: StrictStr
    S: StrictStr
    v: StrictStr
    p: StrictStr
    # 價格變動方向，僅合約
    L: Optional[StrictStr] = None
    i: StrictStr
    BT: StrictBool


class SpotTicker(BaseModel):
    """現貨 ticker（僅 snapshot）"""
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    last_price: StrictStr
    high_price_24h: StrictStr
    low_price_24h: StrictStr
    prev_price_24h: StrictStr
    volume_24h: StrictStr
    turnover_24h: StrictStr
    price_24h_pcnt: StrictStr
    usd_index_price: StrictStr


class OptionTicker(BaseModel):
    """期權 ticker（僅 snapshot）"""
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    bid_price: StrictStr
    bid_size: StrictStr
    bid_iv: StrictStr
    ask_price: StrictStr
    ask_size: StrictStr
    ask_iv: StrictStr
    last_price: StrictStr
    high_price_24h: StrictStr
    low_price_24h: StrictStr
    mark_price: StrictStr
    index_price: StrictStr
    mark_price_iv: StrictStr
    underlying_price: StrictStr
    open_interest: StrictStr
    turnover_24h: StrictStr
    volume_24h: StrictStr
    total_volume: StrictStr
    total_turnover: StrictStr
    delta: StrictStr
    gamma: StrictStr
    vega: StrictStr
    theta: StrictStr
    predicted_delivery_price: StrictStr
    change_24h: StrictStr


class FutureTicker(BaseModel):
    """
    合約 ticker

    同時用於 snapshot 和 delta，None 表示該字段沒有變化。
    """
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    tick_direction: Optional[StrictStr] = None
    price_24h_pcnt: Optional[StrictStr] = None
    last_price: Optional[StrictStr] = None
    prev_price_24h: Optional[StrictStr] = None
    high_price_24h: Optional[StrictStr] = None
    low_price_24h: Optional[StrictStr] = None
    prev_price_1h: Optional[StrictStr] = None
    mark_price: Optional[StrictStr] = None
    index_price: Optional[StrictStr] = None
    open_interest: Optional[StrictStr] = None
    open_interest_value: Optional[StrictStr] = None
    turnover_24h: Optional[StrictStr] = None
    volume_24h: Optional[StrictStr] = None
    next_funding_time: Optional[StrictStr] = None
    funding_rate: Optional[StrictStr] = None
    bid1_price: Optional[StrictStr] = None
    bid1_size: Optional[StrictStr] = None
    ask1_price: Optional[StrictStr] = None
    ask1_size: Optional[StrictStr] = None
    # 以下僅反向交割合約
    delivery_time: Optional[StrictStr] = None
    basis_rate: Optional[StrictStr] = None
    delivery_fee_rate: Optional[StrictStr] = None
    predicted_delivery_price: Optional[StrictStr] = None


class Kline(BaseModel):
    """K線（含槓桿代幣K線）"""
    model_config = WIRE_CONFIG

    start: StrictInt
    end: StrictInt
    interval: StrictStr
    open: StrictStr
    close: StrictStr
    high: StrictStr
    low: StrictStr
    # 槓桿代幣沒有成交量字段
    volume: Optional[StrictStr] = None
    turnover: Optional[StrictStr] = None
    confirm: StrictBool
    timestamp: StrictInt


class Liquidation(BaseModel):
    """強平數據"""
    model_config = CAMEL_CONFIG

    updated_time: StrictInt
    symbol: StrictStr
    side: StrictStr
    size: StrictStr
    price: StrictStr


class LtTicker(BaseModel):
    """槓桿代幣 ticker"""
    model_config = CAMEL_CONFIG

    symbol: StrictStr
    price_24h_pcnt: StrictStr
    last_price: StrictStr
    prev_price_24h: StrictStr
    high_price_24h: StrictStr
    # 交易所返回的字段名就是 lowPrice24h
    low_price24h: StrictStr


class LtNav(BaseModel):
    """槓桿代幣淨值"""
    model_config = CAMEL_CONFIG

    time: StrictInt
    symbol: StrictStr
    nav: StrictStr
    basket_position: StrictStr
    leverage: StrictStr
    basket_loan: StrictStr
    circulation: StrictStr
    basket: StrictStr


# ==================== 私有數據 ====================

class Position(BaseModel):
    """持倉數據"""
    model_config = CAMEL_CONFIG

    # 統一帳戶沒有此字段
    category: Optional[StrictStr] = None
    symbol: StrictStr
    side: StrictStr
    size: StrictStr
    position_idx: StrictInt
    trade_mode: StrictInt
    position_value: StrictStr
    risk_id: StrictInt
    risk_limit_value: StrictStr
    entry_price: StrictStr
    mark_price: StrictStr
    leverage: StrictStr
    position_balance: Optional[StrictStr] = None
    auto_add_margin: Optional[StrictInt] = None
    position_mm: StrictStr = Field(alias="positionMM")
    position_im: StrictStr = Field(alias="positionIM")
    liq_price: StrictStr
    bust_price: StrictStr
    tpsl_mode: StrictStr
    take_profit: StrictStr
    stop_loss: StrictStr
    trailing_stop: StrictStr
    unrealised_pnl: StrictStr
    cum_realised_pnl: StrictStr
    position_status: StrictStr
    created_time: StrictStr
    updated_time: StrictStr


class Execution(BaseModel):
    """成交回報，一條消息可能包含同一訂單的多筆成交"""
    model_config = CAMEL_CONFIG

    category: StrictStr
    symbol: StrictStr
    is_leverage: StrictStr
    order_id: StrictStr
    order_link_id: StrictStr
    side: StrictStr
    order_price: StrictStr
    order_qty: StrictStr
    leaves_qty: StrictStr
    order_type: StrictStr
    stop_order_type: StrictStr
    exec_fee: StrictStr
    exec_id: StrictStr
    exec_price: StrictStr
    exec_qty: StrictStr
    exec_type: StrictStr
    exec_value: StrictStr
    exec_time: StrictStr
    is_maker: StrictBool
    fee_rate: StrictStr
    trade_iv: StrictStr
    mark_iv: StrictStr
    mark_price: StrictStr
    index_price: StrictStr
    underlying_price: StrictStr
    block_trade_id: StrictStr


class Order(BaseModel):
    """訂單更新"""
    model_config = CAMEL_CONFIG

    category: StrictStr
    order_id: StrictStr
    order_link_id: StrictStr
    is_leverage: StrictStr
    block_trade_id: StrictStr
    symbol: StrictStr
    price: StrictStr
    qty: StrictStr
    side: StrictStr
    position_idx: StrictInt
    order_status: StrictStr
    cancel_type: StrictStr
    reject_reason: StrictStr
    avg_price: StrictStr
    leaves_qty: StrictStr
    leaves_value: StrictStr
    cum_exec_qty: StrictStr
    cum_exec_value: StrictStr
    cum_exec_fee: StrictStr
    time_in_force: StrictStr
    order_type: StrictStr
    stop_order_type: StrictStr
    order_iv: StrictStr
    trigger_price: StrictStr
    take_profit: StrictStr
    stop_loss: StrictStr
    tp_trigger_by: StrictStr
    sl_trigger_by: StrictStr
    trigger_direction: StrictInt
    trigger_by: StrictStr
    last_price_on_created: StrictStr
    reduce_only: StrictBool
    close_on_trigger: StrictBool
    created_time: StrictStr
    updated_time: StrictStr


class WalletCoin(BaseModel):
    """錢包幣種明細"""
    model_config = CAMEL_CONFIG

    coin: StrictStr
    equity: StrictStr
    usd_value: StrictStr
    wallet_balance: StrictStr
    borrow_amount: StrictStr
    available_to_borrow: StrictStr
    available_to_withdraw: StrictStr
    accrued_interest: StrictStr
    total_order_im: StrictStr = Field(alias="totalOrderIM")
    total_position_im: StrictStr = Field(alias="totalPositionIM")
    total_position_mm: StrictStr = Field(alias="totalPositionMM")
    unrealised_pnl: StrictStr
    cum_realised_pnl: StrictStr


class Wallet(BaseModel):
    """錢包數據，非統一帳戶下匯總字段為空字符串"""
    model_config = CAMEL_CONFIG

    account_type: StrictStr
    account_im_rate: StrictStr = Field(alias="accountIMRate")
    account_mm_rate: StrictStr = Field(alias="accountMMRate")
    total_equity: StrictStr
    total_wallet_balance: StrictStr
    total_margin_balance: StrictStr
    total_available_balance: StrictStr
    total_perp_upl: StrictStr = Field(alias="totalPerpUPL")
    total_initial_margin: StrictStr
    total_maintenance_margin: StrictStr
    coin: List[WalletCoin]


class Greek(BaseModel):
    """期權 greeks"""
    model_config = CAMEL_CONFIG

    base_coin: StrictStr
    total_delta: StrictStr
    total_gamma: StrictStr
    total_vega: StrictStr
    total_theta: StrictStr


# ==================== 變體 ====================

class OrderbookResponse(BasePublicResponse[Orderbook]):
    pass


class TradeResponse(BasePublicResponse[List[Trade]]):
    pass


class KlineResponse(BasePublicResponse[List[Kline]]):
    pass


class SpotTickerResponse(BaseTickerPublicResponse[SpotTicker]):
    pass


class FutureTickerResponse(BaseTickerPublicResponse[FutureTicker]):
    pass


class LiquidationResponse(BasePublicResponse[Liquidation]):
    pass


class LtTickerResponse(BasePublicResponse[LtTicker]):
    pass


class LtNavResponse(BasePublicResponse[LtNav]):
    pass


class OptionOrderbookResponse(BaseOptionPublicResponse[Orderbook]):
    pass


class OptionTradeResponse(BaseOptionPublicResponse[List[Trade]]):
    pass


class OptionTickerResponse(BaseOptionPublicResponse[OptionTicker]):
    pass


class PositionResponse(BasePrivateResponse[List[Position]]):
    pass


class ExecutionResponse(BasePrivateResponse[List[Execution]]):
    pass


class OrderResponse(BasePrivateResponse[List[Order]]):
    pass


class WalletResponse(BasePrivateResponse[List[Wallet]]):
    pass


class GreekResponse(BasePrivateResponse[List[Greek]]):
    pass


SPOT_PUBLIC_VARIANTS = (
    OrderbookResponse,
    TradeResponse,
    SpotTickerResponse,
    KlineResponse,
    LtTickerResponse,
    LtNavResponse,
    OpResponse,
)

FUTURE_PUBLIC_VARIANTS = (
    OrderbookResponse,
    TradeResponse,
    FutureTickerResponse,
    KlineResponse,
    LiquidationResponse,
    OpResponse,
)

OPTION_PUBLIC_VARIANTS = (
    OptionOrderbookResponse,
    OptionTradeResponse,
    OptionTickerResponse,
    OptionPongResponse,
    OptionSubscriptionResponse,
)

PRIVATE_VARIANTS = (
    PositionResponse,
    ExecutionResponse,
    OrderResponse,
    WalletResponse,
    GreekResponse,
    PrivatePongResponse,
    OpResponse,
)

SpotPublicResponse = Union[SPOT_PUBLIC_VARIANTS]
FuturePublicResponse = Union[FUTURE_PUBLIC_VARIANTS]
OptionPublicResponse = Union[OPTION_PUBLIC_VARIANTS]
PrivateResponse = Union[PRIVATE_VARIANTS]


# ==================== 解碼器 ====================

class ResponseDecoder(Generic[M]):
    """
    無標籤解碼器

    按 variants 的順序逐個嘗試，返回第一個驗證通過的模型實例。
    """

    def __init__(self, name: str, variants: Sequence[Type[M]]):
        if not variants:
            raise ValueError("至少需要一個響應變體")
        self.name = name
        self.variants: Tuple[Type[M], ...] = tuple(variants)

    def decode(self, raw: Union[str, bytes]) -> M:
        """
        解碼一條文本消息

        Raises:
            WSDecodeError: 不是合法 JSON，或不匹配任何變體
        """
        try:
            text = raw.decode('utf-8') if isinstance(raw, (bytes, bytearray)) else raw
        except UnicodeDecodeError as e:
            raise WSDecodeError(f"{self.name} 消息不是合法 UTF-8: {e}", raw=repr(raw)) from e

        try:
            payload = json.loads(text)
        # 超長整數會拋出 ValueError，嵌套過深會拋出 RecursionError
        except (ValueError, RecursionError) as e:
            raise WSDecodeError(f"{self.name} 消息不是合法 JSON: {e}", raw=text) from e

        for variant in self.variants:
            try:
                return variant.model_validate(payload)
            except ValidationError:
                continue

        raise WSDecodeError(f"{self.name} 消息不匹配任何已知響應類型", raw=text)


SPOT_DECODER: ResponseDecoder = ResponseDecoder("spot", SPOT_PUBLIC_VARIANTS)
FUTURE_DECODER: ResponseDecoder = ResponseDecoder("future", FUTURE_PUBLIC_VARIANTS)
OPTION_DECODER: ResponseDecoder = ResponseDecoder("option", OPTION_PUBLIC_VARIANTS)
PRIVATE_DECODER: ResponseDecoder = ResponseDecoder("private", PRIVATE_VARIANTS)
