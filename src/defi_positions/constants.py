"""Movement network endpoints and DeFi protocol contract addresses."""

from typing import TypedDict


class NetworkEndpoints(TypedDict):
    fullnode: str
    explorer: str
    indexer: str


MAINNET_ENDPOINTS: NetworkEndpoints = {
    "fullnode": "https://mainnet.movementnetwork.xyz/v1",
    "explorer": "https://explorer.movementnetwork.xyz",
    "indexer": "https://indexer.mainnet.movementnetwork.xyz/v1/graphql",
}

TESTNET_ENDPOINTS: NetworkEndpoints = {
    "fullnode": "https://testnet.movementnetwork.xyz/v1",
    "explorer": "https://explorer-testnet.movementnetwork.xyz",
    "indexer": "https://hasura.testnet.movementnetwork.xyz/v1/graphql",
}

COIN_STORE = "0x1::coin::CoinStore"

# Protocol contract addresses (mainnet)
ECHELON = "0x6a01d5761d43a5b5a0ccbfc42edf2d02c0611464aae99a2ea0e0d4819f0550b5"
JOULE = "0x6a164188af7bb6a8268339343a5afe0242292713709af8801dafba3a054dc2f2"
MOVEPOSITION = "0xccd2621d2897d407e06d18e6ebe3be0e6d9b61f1e809dd49360522b9105812cf"
MERIDIAN = "0x8f396e4246b2ba87b51c0739ef5ea4f26480d2cf4e42c4ca7e86e98f1d5e3d82"
RAZOR = "0x7730cd28ee1cdc9e999336cbc430f99e7c44397c0aa77516f6f23a78559bb5"
YUZU = "0x4bf51972879e3b95c4781a5cdcb9e1ee24ef483e7d22f2d903626f126df62bd1"
LAYERBANK = "0xf257d40859456809be19dfee7f4c55c4d033680096aeeb4228b7a15749ab68ea"
MOSAIC = "0xede23ef215f0594e658b148c2a391b1523335ab01495d8637e076ec510c6ec3c"

# Response header carrying the pagination cursor of the fullnode REST API
CURSOR_HEADER = "x-aptos-cursor"
MAX_PAGE_LIMIT = 9999
