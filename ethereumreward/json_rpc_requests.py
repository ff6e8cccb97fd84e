# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from typing import List, Dict, Union, Generator, Any


def generate_get_block_by_hash_json_rpc(
    block_hash: str,
    include_transactions: bool,
) -> Dict[str, Any]:
    return generate_json_rpc(
        method="eth_getBlockByHash",
        params=[block_hash, include_transactions],
    )


def generate_get_block_by_number_json_rpc(
    block_number: Union[int, str],
    include_transactions: bool,
) -> Dict[str, Any]:
    return generate_json_rpc(
        method="eth_getBlockByNumber",
        params=[_to_block_param(block_number), include_transactions],
    )


def generate_get_uncle_by_block_number_and_index_json_rpc(
    block_number: int, uncle_count: int
) -> Generator[Dict[str, Any], None, None]:
    for uncle_pos in range(uncle_count):
        yield generate_json_rpc(
            method="eth_getUncleByBlockNumberAndIndex",
            params=[hex(block_number), hex(uncle_pos)],
            request_id=uncle_pos,
        )


def generate_get_receipt_json_rpc(
    transaction_hashes: List[str],
) -> Generator[Dict[str, Any], None, None]:
    for idx, transaction_hash in enumerate(transaction_hashes):
        yield generate_json_rpc(
            method="eth_getTransactionReceipt",
            params=[transaction_hash],
            request_id=idx,
        )


def generate_get_balance_json_rpc(address: str, block_hash: str) -> Dict[str, Any]:
    # EIP-1898: query by block hash, the number may point to another fork
    return generate_json_rpc(
        method="eth_getBalance",
        params=[address, {"blockHash": block_hash}],
    )


def _to_block_param(block: Union[int, str]) -> str:
    return hex(block) if isinstance(block, int) else block


def generate_json_rpc(
    method: str,
    params: Any,
    request_id: Union[int, str] = 1,
) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": request_id,
    }
