"""
配置文件
"""
import os
from dotenv import load_dotenv

# 載入環境變數
load_dotenv()

# API配置
BYBIT_API_KEY = os.getenv('BYBIT_API_KEY')
BYBIT_SECRET_KEY = os.getenv('BYBIT_SECRET_KEY')
WS_PROXY = os.getenv('PROXY_WEBSOCKET')

# V5 WebSocket 端點
MAINNET_SPOT = "wss://stream.bybit.com/v5/public/spot"
MAINNET_LINEAR = "wss://stream.bybit.com/v5/public/linear"
MAINNET_INVERSE = "wss://stream.bybit.com/v5/public/inverse"
MAINNET_OPTION = "wss://stream.bybit.com/v5/public/option"
MAINNET_PRIVATE = "wss://stream.bybit.com/v5/private"
TESTNET_SPOT = "wss://stream-testnet.bybit.com/v5/public/spot"
TESTNET_LINEAR = "wss://stream-testnet.bybit.com/v5/public/linear"
TESTNET_INVERSE = "wss://stream-testnet.bybit.com/v5/public/inverse"
TESTNET_OPTION = "wss://stream-testnet.bybit.com/v5/public/option"
TESTNET_PRIVATE = "wss://stream-testnet.bybit.com/v5/private"

# 舊版現貨 v1 行情端點
MAINNET_LEGACY_SPOT = "wss://stream.bybit.com/spot/quote/ws/v1"
TESTNET_LEGACY_SPOT = "wss://stream-testnet.bybit.com/spot/quote/ws/v1"

# 舊版現貨 v2 行情與 v1 私有端點
MAINNET_LEGACY_SPOT_V2 = "wss://stream.bybit.com/spot/quote/ws/v2"
TESTNET_LEGACY_SPOT_V2 = "wss://stream-testnet.bybit.com/spot/quote/ws/v2"
MAINNET_LEGACY_SPOT_PRIVATE = "wss://stream.bybit.com/spot/ws"
TESTNET_LEGACY_SPOT_PRIVATE = "wss://stream-testnet.bybit.com/spot/ws"

# 舊版 USDT 永續端點
MAINNET_LEGACY_LINEAR_PUBLIC = "wss://stream.bybit.com/realtime_public"
TESTNET_LEGACY_LINEAR_PUBLIC = "wss://stream-testnet.bybit.com/realtime_public"
MAINNET_LEGACY_LINEAR_PRIVATE = "wss://stream.bybit.com/realtime_private"
TESTNET_LEGACY_LINEAR_PRIVATE = "wss://stream-testnet.bybit.com/realtime_private"

# 舊版反向合約端點（公共與私有共用）
MAINNET_LEGACY_INVERSE = "wss://stream.bybit.com/realtime"
TESTNET_LEGACY_INVERSE = "wss://stream-testnet.bybit.com/realtime"

# 連接參數（秒）
READ_TIMEOUT = 10
LEGACY_READ_TIMEOUT = 15
PING_INTERVAL = 20
LEGACY_PING_INTERVAL = 30

# 訂閱與認證
SUBSCRIBE_BATCH_SIZE = 10
AUTH_EXPIRES_WINDOW_MS = 10000

# 日志配置
LOG_FILE = os.getenv('LOG_FILE', "bybit_ws.log")
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
