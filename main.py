#!/usr/bin/env python
"""
Bybit WebSocket 行情/私有頻道訂閱程序主執行文件
"""
import argparse
import sys

from rich import box
from rich.console import Console
from rich.live import Live
from rich.table import Table

from config import BYBIT_API_KEY, BYBIT_SECRET_KEY, WS_PROXY
from exceptions import BybitWSError
from logger import setup_logger
from ws_client import (
    FutureOrderbookDepth,
    KlineInterval,
    LocalOrderBook,
    OptionOrderbookDepth,
    SpotOrderbookDepth,
    WebSocketApiClient,
)
from ws_client.responses import OptionOrderbookResponse, OrderbookResponse

logger = setup_logger("main")

BUILDERS = {
    'spot': WebSocketApiClient.spot,
    'linear': WebSocketApiClient.future_linear,
    'inverse': WebSocketApiClient.future_inverse,
    'option': WebSocketApiClient.option,
    'private': WebSocketApiClient.private,
    'legacy-spot': WebSocketApiClient.legacy_spot,
    'legacy-spot-v2': WebSocketApiClient.legacy_spot_v2,
    'legacy-spot-private': WebSocketApiClient.legacy_spot_private,
    'legacy-linear': WebSocketApiClient.legacy_linear_public,
    'legacy-linear-private': WebSocketApiClient.legacy_linear_private,
    'legacy-inverse': WebSocketApiClient.legacy_inverse_public,
    'legacy-inverse-private': WebSocketApiClient.legacy_inverse_private,
}

MARKETS = list(BUILDERS)
PRIVATE_MARKETS = ('private', 'legacy-spot-private', 'legacy-linear-private', 'legacy-inverse-private')
ORDERBOOK_MARKETS = ('spot', 'linear', 'inverse', 'option')


def parse_arguments():
    """解析命令行參數"""
    parser = argparse.ArgumentParser(description='Bybit WebSocket 實時數據訂閱程序')

    parser.add_argument('--market', choices=MARKETS, default='spot', help='市場類型 (默認: spot)')
    parser.add_argument('--symbol', type=str, default='BTCUSDT', help='交易對 (默認: BTCUSDT)')
    parser.add_argument('--testnet', action='store_true', help='連接測試網')
    parser.add_argument('--api-key', type=str, help='API Key (可選，默認使用環境變數或配置文件)')
    parser.add_argument('--secret-key', type=str, help='Secret Key (可選，默認使用環境變數或配置文件)')
    parser.add_argument('--ws-proxy', type=str, help='WebSocket Proxy (可選，默認使用環境變數或配置文件)')
    parser.add_argument('--orderbook', action='store_true', help='以表格形式顯示本地訂單簿')
    parser.add_argument('--depth', type=int, default=10, help='訂單簿顯示檔數 (默認: 10)')

    return parser.parse_args()


def create_client(args, api_key, secret_key, ws_proxy=None):
    """按市場類型創建客戶端並添加訂閱"""
    market = args.market
    symbol = args.symbol

    builder = BUILDERS[market]()
    if args.testnet:
        builder.testnet()
    builder.proxy(ws_proxy)

    if market in PRIVATE_MARKETS:
        client = builder.build_with_credentials(api_key, secret_key)
        # 現貨私有頻道認證後自動推送，無需訂閱
        if market != 'legacy-spot-private':
            client.subscribe_position()
            client.subscribe_execution()
            client.subscribe_order()
            client.subscribe_wallet()
        return client

    client = builder.build()

    if market == 'spot':
        client.subscribe_orderbook(symbol, SpotOrderbookDepth.LEVEL50)
        if not args.orderbook:
            client.subscribe_trade(symbol)
            client.subscribe_ticker(symbol)
            client.subscribe_kline(symbol, KlineInterval.MIN1)
    elif market in ('linear', 'inverse'):
        client.subscribe_orderbook(symbol, FutureOrderbookDepth.LEVEL50)
        if not args.orderbook:
            client.subscribe_trade(symbol)
            client.subscribe_ticker(symbol)
            client.subscribe_liquidation(symbol)
    elif market == 'option':
        client.subscribe_orderbook(symbol, OptionOrderbookDepth.LEVEL25)
        if not args.orderbook:
            client.subscribe_ticker(symbol)
    elif market == 'legacy-spot-v2':
        client.subscribe_trade(symbol)
        client.subscribe_book_ticker(symbol)
        client.subscribe_depth(symbol)
    elif market in ('legacy-linear', 'legacy-inverse'):
        client.subscribe_order_book_l2_25([symbol])
        client.subscribe_trade([symbol])
        client.subscribe_instrument_info([symbol])
    else:
        client.subscribe_trade(symbol)
        client.subscribe_realtimes(symbol)
        client.subscribe_depth(symbol)

    return client


def render_orderbook(book: LocalOrderBook, depth: int) -> Table:
    """將本地訂單簿渲染為表格"""
    bids, asks = book.top(depth)
    table = Table(title=f"{book.symbol} 訂單簿 (更新ID: {book.update_id})", show_header=True,
                  header_style="bold white on dark_blue", box=box.SIMPLE)
    table.add_column("買單數量", justify="right", style="green")
    table.add_column("買價", justify="right", style="green")
    table.add_column("賣價", justify="left", style="red")
    table.add_column("賣單數量", justify="left", style="red")

    for i in range(max(len(bids), len(asks))):
        bid_price, bid_qty = (str(bids[i][0]), str(bids[i][1])) if i < len(bids) else ("", "")
        ask_price, ask_qty = (str(asks[i][0]), str(asks[i][1])) if i < len(asks) else ("", "")
        table.add_row(bid_qty, bid_price, ask_price, ask_qty)

    mid = book.mid_price()
    if mid is not None:
        table.caption = f"中間價: {mid}"
    return table


def run_orderbook_view(client, symbol, depth):
    """訂閱訂單簿並實時刷新表格"""
    book = LocalOrderBook(symbol)
    console = Console()

    with Live(render_orderbook(book, depth), console=console, refresh_per_second=4) as live:
        def on_message(message):
            if isinstance(message, (OrderbookResponse, OptionOrderbookResponse)):
                book.apply(message)
                live.update(render_orderbook(book, depth))

        client.run(on_message)


def run_stream(client):
    """打印收到的每條消息"""
    def on_message(message):
        logger.info(f"{type(message).__name__}: {message}")

    client.run(on_message)


def main():
    """主函數"""
    args = parse_arguments()

    api_key = args.api_key or BYBIT_API_KEY
    secret_key = args.secret_key or BYBIT_SECRET_KEY
    ws_proxy = args.ws_proxy or WS_PROXY

    if args.market in PRIVATE_MARKETS and (not api_key or not secret_key):
        logger.error("私有頻道缺少API密鑰，請通過命令行參數或環境變量提供")
        sys.exit(1)

    if args.orderbook and args.market not in ORDERBOOK_MARKETS:
        logger.error(f"{args.market} 市場不支持訂單簿顯示")
        sys.exit(1)

    client = create_client(args, api_key, secret_key, ws_proxy=ws_proxy)
    logger.info(f"連接 {client.uri}，訂閱: {', '.join(client.topics)}")

    try:
        if args.orderbook:
            run_orderbook_view(client, args.symbol, args.depth)
        else:
            run_stream(client)
    except KeyboardInterrupt:
        logger.info("收到中斷信號，正在退出...")
        client.close()
    except BybitWSError as e:
        logger.error(f"WebSocket 會話異常結束: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
