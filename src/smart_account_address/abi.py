"""
Contract ABIs for the smart account factory.

Only the view function used to predict account addresses is included.
"""

# SmartAccountFactory ABI
SMART_ACCOUNT_FACTORY_ABI = [
    {
        "type": "function",
        "name": "getAddressWithNonce",
        "inputs": [
            {"name": "_admin", "type": "address"},
            {"name": "_nonce", "type": "bytes32"},
        ],
        "outputs": [{"type": "address"}],
        "stateMutability": "view",
    },
]
