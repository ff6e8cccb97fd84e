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


from typing import Optional, Union
from eth_utils import is_hex, remove_0x_prefix

BLOCK_TAGS = ("latest", "earliest", "safe", "finalized")


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    if address is None or not isinstance(address, str):
        return address
    return address.lower()


def is_valid_block_hash(block_hash) -> bool:
    if not isinstance(block_hash, str) or not block_hash.startswith("0x"):
        return False
    return is_hex(block_hash) and len(remove_0x_prefix(block_hash)) == 64


def parse_block_parameter(value) -> Union[int, str]:
    """Parse a JSON-RPC block parameter: a tag, a hex quantity or a plain int."""
    if isinstance(value, bool):
        raise ValueError(f"invalid block parameter: {value}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"block number must be positive, got {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid block parameter: {value}")

    value = value.strip().lower()
    if value in BLOCK_TAGS:
        return value
    if value.startswith("0x") and is_hex(value) and len(value) > 2:
        return int(value, 16)
    if value.isdigit():
        return int(value)
    raise ValueError(f"invalid block parameter: {value}")
