from typing import Dict, Any, Optional

from ethereumreward.domain.miner_data import MinerDataResult


class EthMinerDataMapper(object):
    def miner_data_to_dict(self, miner_data: MinerDataResult) -> Dict[str, Any]:
        return {
            "netBlockReward": miner_data.net_block_reward.to_hex(),
            "staticBlockReward": miner_data.static_block_reward.to_hex(),
            "transactionFee": miner_data.transaction_fee.to_hex(),
            "uncleInclusionReward": miner_data.uncle_inclusion_reward.to_hex(),
            "uncleRewards": [
                {"hash": entry.hash, "coinbase": entry.coinbase}
                for entry in miner_data.uncle_rewards
            ],
            "coinbase": miner_data.coinbase,
            "extraData": miner_data.extra_data,
            "difficulty": _to_quantity(miner_data.difficulty),
            "totalDifficulty": _to_quantity(miner_data.total_difficulty),
            # transactions counted as zero gas used, their receipts were unavailable
            "missingReceipts": list(miner_data.missing_receipts),
        }


def _to_quantity(value: Optional[int]) -> Optional[str]:
    if value is None:
        return None
    return hex(value)
