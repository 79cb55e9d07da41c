# CoinGecko demo plan authenticates with a static key header
API_KEY_HEADER = "x-cg-demo-api-key"

# Default cache revalidation hint, in seconds
DEFAULT_REVALIDATE_SECONDS = 60

# httpx request extension carrying the revalidation hint to the transport
REVALIDATE_EXTENSION = "revalidate"

# On-chain (GeckoTerminal) endpoints
TOKEN_POOLS_ENDPOINT = "onchain/networks/{network}/tokens/{contract_address}/pools"
SEARCH_POOLS_ENDPOINT = "onchain/search/pools"
PING_ENDPOINT = "ping"
