from typing import Dict, Any

from ethereumreward.domain.block import EthUncleBlock
from ethereumreward.utils import to_normalized_address


class EthUncleBlockMapper(object):
    def json_dict_to_block(self, json_dict: Dict[str, Any]) -> EthUncleBlock:
        block = EthUncleBlock()
        block.hash = json_dict.get("hash")
        block.miner = to_normalized_address(json_dict.get("miner"))
        return block
