"""Protocol constants for the Dash Core JSON-RPC interface."""

# RPC_IN_WARMUP: the node is still loading the block index or verifying blocks
# https://github.com/dashpay/dash/blob/master/src/rpc/protocol.h
E_IN_WARMUP = -28

# Body dashd sends with HTTP 500 when its RPC work queue is full
WORK_QUEUE_EXCEEDED = "Work queue depth exceeded"
OVERLOADED_CODE = 429

# Request ids are drawn from [0, REQUEST_ID_LIMIT)
REQUEST_ID_LIMIT = 100000

ROOT_PATH = "/"
WALLET_PATH_PREFIX = "/wallet/"
