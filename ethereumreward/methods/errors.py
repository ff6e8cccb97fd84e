from typing import NamedTuple, Dict, Any


class JsonRpcError(NamedTuple):
    code: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


INVALID_REQUEST = JsonRpcError(-32600, "Invalid Request")
METHOD_NOT_FOUND = JsonRpcError(-32601, "Method not found")
INVALID_PARAMS = JsonRpcError(-32602, "Invalid params")
INTERNAL_ERROR = JsonRpcError(-32603, "Internal error")

WORLD_STATE_UNAVAILABLE = JsonRpcError(-32000, "World state unavailable")
TRANSACTION_RECEIPT_UNAVAILABLE = JsonRpcError(
    -32000, "Transaction receipt unavailable"
)
