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

from typing import Optional, List

from ethereumreward.domain.transaction import EthTransaction


class EthBlock(object):
    def __init__(self):
        self.number: Optional[int] = None
        self.hash: Optional[str] = None
        self.state_root: Optional[str] = None
        self.miner: Optional[str] = None
        self.difficulty: Optional[int] = None
        self.total_difficulty: Optional[int] = None
        self.extra_data: Optional[str] = None

        self.transactions: List[EthTransaction] = []

        # uncle hashes as declared by the block itself
        self.uncles: List[str] = []

    @property
    def ommer_count(self) -> int:
        return len(self.uncles)


class EthUncleBlock(object):
    def __init__(self):
        self.hash: Optional[str] = None
        self.miner: Optional[str] = None
