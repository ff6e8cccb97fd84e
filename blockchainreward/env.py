import os

# HTTP request timeout towards the JSON-RPC node
REQUEST_TIMEOUT_SECONDS = int(
    os.environ.get("BLOCKCHAIN_REWARD_REQUEST_TIMEOUT_SECONDS", 60)
)

# how many times a failed POST is retried by the requests session
RPC_RETRY_TOTAL = int(os.environ.get("BLOCKCHAIN_REWARD_RPC_RETRY_TOTAL", 5))

# one of "zero" or "strict", see ethereumreward.service.block_reward_calculator
MISSING_RECEIPT_POLICY = os.environ.get(
    "BLOCKCHAIN_REWARD_MISSING_RECEIPT_POLICY", "zero"
)
