import json
from typing import Dict, List, Optional

import pytest


def make_hash(c: str) -> str:
    return "0x" + c * 64


def make_address(c: str) -> str:
    return "0x" + c * 40


def make_block_json(
    number: int,
    block_hash: str,
    miner: str,
    transactions: Optional[List[Dict]] = None,
    uncles: Optional[List[str]] = None,
    total_difficulty: Optional[int] = 1000,
) -> Dict:
    block = {
        "number": hex(number),
        "hash": block_hash,
        "parentHash": make_hash("0"),
        "stateRoot": make_hash("5"),
        "miner": miner,
        "difficulty": hex(10),
        "extraData": "0x6d696e6572",
        "timestamp": hex(1600000000 + number),
        "transactions": transactions or [],
        "uncles": uncles or [],
    }
    if total_difficulty is not None:
        block["totalDifficulty"] = hex(total_difficulty)
    return block


def make_tx_json(tx_hash: str, gas_price: int) -> Dict:
    return {
        "hash": tx_hash,
        "from": make_address("f"),
        "gas": hex(21000),
        "gasPrice": hex(gas_price),
        "type": "0x0",
    }


def make_uncle_json(number: int, uncle_hash: str, miner: str) -> Dict:
    return {
        "number": hex(number),
        "hash": uncle_hash,
        "parentHash": make_hash("0"),
        "miner": miner,
        "difficulty": hex(9),
        "extraData": "0x",
        "timestamp": hex(1600000000),
        "uncles": [],
    }


class FakeBatchProvider(object):
    """Answers JSON-RPC requests from in-memory blocks, batches in reverse order."""

    def __init__(self):
        self.blocks_by_hash: Dict[str, Dict] = {}
        self.canonical_blocks: Dict[int, Dict] = {}
        self.canonical_uncles: Dict[int, List[Dict]] = {}
        self.receipts: Dict[str, Dict] = {}
        self.pruned_blocks = set()
        self.errors: Dict[str, Dict] = {}
        self.requests: List[Dict] = []

    def add_block(
        self, block: Dict, uncles: Optional[List[Dict]] = None, canonical=True
    ):
        self.blocks_by_hash[block["hash"]] = block
        if canonical:
            number = int(block["number"], 16)
            self.canonical_blocks[number] = block
            self.canonical_uncles[number] = uncles or []

    def add_receipt(self, tx_hash: str, gas_used: int):
        self.receipts[tx_hash] = {"transactionHash": tx_hash, "gasUsed": hex(gas_used)}

    @property
    def methods(self) -> List[str]:
        return [r["method"] for r in self.requests]

    def make_batch_request(self, text):
        request = json.loads(text)
        if isinstance(request, list):
            return [self._answer(r) for r in reversed(request)]
        return self._answer(request)

    def _answer(self, request: Dict) -> Dict:
        self.requests.append(request)
        method, params = request["method"], request["params"]
        response = {"jsonrpc": "2.0", "id": request["id"]}

        if method in self.errors:
            response["error"] = self.errors[method]
            return response

        if method == "eth_getBlockByHash":
            response["result"] = self.blocks_by_hash.get(params[0])
        elif method == "eth_getBlockByNumber":
            response["result"] = self.canonical_blocks.get(self._number(params[0]))
        elif method == "eth_getUncleByBlockNumberAndIndex":
            uncles = self.canonical_uncles.get(int(params[0], 16), [])
            response["result"] = self._at(uncles, params[1])
        elif method == "eth_getTransactionReceipt":
            response["result"] = self.receipts.get(params[0])
        elif method == "eth_getBalance":
            if params[1]["blockHash"] in self.pruned_blocks:
                response["error"] = {
                    "code": -32000,
                    "message": "missing trie node 5555 (path )",
                }
            else:
                response["result"] = "0x0"
        else:
            response["error"] = {"code": -32601, "message": "method not found"}
        return response

    def _number(self, param: str) -> Optional[int]:
        if param == "latest":
            return max(self.canonical_blocks) if self.canonical_blocks else None
        if param == "earliest":
            return 0
        return int(param, 16)

    @staticmethod
    def _at(items: List[Dict], pos: str) -> Optional[Dict]:
        pos = int(pos, 16)
        return items[pos] if pos < len(items) else None


BLOCK_NUMBER = 8369999
BLOCK_HASH = make_hash("b")
MINER = make_address("a")
TX1 = make_hash("1")
TX2 = make_hash("2")
UNCLE1 = make_hash("c")
UNCLE2 = make_hash("d")
UNCLE_MINER1 = make_address("c")
UNCLE_MINER2 = make_address("d")


@pytest.fixture
def provider() -> FakeBatchProvider:
    """Block 8369999 with two transactions and two uncles, one receipt missing."""
    provider = FakeBatchProvider()
    block = make_block_json(
        BLOCK_NUMBER,
        BLOCK_HASH,
        MINER,
        transactions=[make_tx_json(TX1, 2), make_tx_json(TX2, 3)],
        uncles=[UNCLE1, UNCLE2],
    )
    uncles = [
        make_uncle_json(BLOCK_NUMBER - 1, UNCLE1, UNCLE_MINER1),
        make_uncle_json(BLOCK_NUMBER - 2, UNCLE2, UNCLE_MINER2),
    ]
    provider.add_block(block, uncles)
    provider.add_receipt(TX1, 100)
    return provider
