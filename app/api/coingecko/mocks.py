MOCK_BASE_URL = "https://api.coingecko.test/api/v3"
MOCK_HOST = "api.coingecko.test"

MOCK_NETWORK = "eth"
MOCK_CONTRACT_ADDRESS = "0xABC"

MOCK_POOL = {
    "id": "p1",
    "address": "0xABC",
    "name": "Pool1",
    "network": "eth",
}

MOCK_SEARCH_POOL = {
    "id": "d1",
    "address": "0xD",
    "name": "Doge",
    "network": "eth",
}

# Pool resource as returned by the on-chain endpoints
MOCK_POOL_RESOURCE = {
    "id": "eth_0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640",
    "type": "pool",
    "attributes": {
        "base_token_price_usd": "3621.62",
        "address": "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640",
        "name": "WETH / USDC 0.05%",
        "pool_created_at": "2021-12-29T12:35:14Z",
        "reserve_in_usd": "163284823.1049",
    },
    "relationships": {
        "base_token": {
            "data": {
                "id": "eth_0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
                "type": "token",
            }
        },
        "quote_token": {
            "data": {
                "id": "eth_0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
                "type": "token",
            }
        },
        "dex": {"data": {"id": "uniswap_v3", "type": "dex"}},
    },
}

MOCK_PING_RESPONSE = {"gecko_says": "(V3) To the Moon!"}
