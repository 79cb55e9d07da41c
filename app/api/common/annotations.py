POOL_ID_DESCRIPTION = "CoinGecko pool identifier, prefixed with the network id (e.g. 'eth_0x88e6...')"
POOL_ADDRESS_DESCRIPTION = "On-chain address of the liquidity pool"
NETWORK_DESCRIPTION = "CoinGecko on-chain network identifier (e.g. 'eth', 'solana', 'base')"
CONTRACT_ADDRESS_DESCRIPTION = "0x-prefixed contract address of the token in case of EVM chains, base58 encoded address for Solana"
TOKEN_QUERY_DESCRIPTION = (
    "Token identifier or free-text query, used when network and contract address are not both provided"
)
