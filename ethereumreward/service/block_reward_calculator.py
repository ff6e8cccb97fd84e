import logging
from typing import Callable, Optional, Sequence, Tuple, List

from ethereumreward.domain.block import EthBlock
from ethereumreward.domain.miner_data import MinerDataResult, UncleRewardEntry
from ethereumreward.domain.wei import Wei

logger = logging.getLogger(__name__)

# the including miner earns 1/32 of the static reward per uncle
UNCLE_INCLUSION_REWARD_DIVISOR = 32

FeeLookup = Callable[[str], Optional[int]]
OmmerCoinbaseLookup = Callable[[int], Optional[Sequence[Tuple[str, str]]]]


class MissingReceiptError(Exception):
    def __init__(self, transaction_hash: str):
        super().__init__(f"receipt of transaction {transaction_hash} is unavailable")
        self.transaction_hash = transaction_hash


# hint: this class is not Enum
class MissingReceiptPolicy:
    # count the transaction as zero gas used, and mark the result as partial
    ZERO = "zero"
    # abort the whole calculation
    STRICT = "strict"

    ALL = [ZERO, STRICT]


class EthBlockRewardCalculator:
    def __init__(self, missing_receipt_policy: str = MissingReceiptPolicy.ZERO):
        if missing_receipt_policy not in MissingReceiptPolicy.ALL:
            raise ValueError(
                f"unknown missing receipt policy: {missing_receipt_policy}"
            )
        self.missing_receipt_policy = missing_receipt_policy

    def calculate(
        self,
        block: EthBlock,
        static_reward: Wei,
        fee_lookup: FeeLookup,
        ommer_coinbase_lookup: OmmerCoinbaseLookup,
    ) -> MinerDataResult:
        transaction_fee, missing_receipts = self.calculate_transaction_fee(
            block, fee_lookup
        )

        # the header's own uncle list, not the canonical body, decides the bonus
        uncle_inclusion_reward = static_reward.multiply(block.ommer_count).divide(
            UNCLE_INCLUSION_REWARD_DIVISOR
        )
        net_block_reward = static_reward.add(transaction_fee).add(
            uncle_inclusion_reward
        )

        uncle_rewards = self.uncle_rewards(block, ommer_coinbase_lookup)

        return MinerDataResult(
            net_block_reward=net_block_reward,
            static_block_reward=static_reward,
            transaction_fee=transaction_fee,
            uncle_inclusion_reward=uncle_inclusion_reward,
            uncle_rewards=uncle_rewards,
            coinbase=block.miner,
            extra_data=block.extra_data,
            difficulty=block.difficulty,
            total_difficulty=block.total_difficulty,
            missing_receipts=missing_receipts,
        )

    def calculate_transaction_fee(
        self, block: EthBlock, fee_lookup: FeeLookup
    ) -> Tuple[Wei, Tuple[str, ...]]:
        transaction_fee = Wei.ZERO
        missing_receipts: List[str] = []
        for tx in block.transactions:
            gas_used = fee_lookup(tx.hash)
            if gas_used is None:
                if self.missing_receipt_policy == MissingReceiptPolicy.STRICT:
                    raise MissingReceiptError(tx.hash)
                missing_receipts.append(tx.hash)
                gas_used = 0
            transaction_fee = transaction_fee.add(tx.gas_price.multiply(gas_used))

        if len(missing_receipts) > 0:
            logger.warning(
                f"block {block.number} has {len(missing_receipts)} transactions "
                f"without receipt, count them as zero gas used"
            )
        return transaction_fee, tuple(missing_receipts)

    def uncle_rewards(
        self, block: EthBlock, ommer_coinbase_lookup: OmmerCoinbaseLookup
    ) -> Tuple[UncleRewardEntry, ...]:
        ommers = ommer_coinbase_lookup(block.number)
        if ommers is None:
            return ()

        # keyed by hash, a repeated hash keeps its first position
        rewards = {}
        for ommer_hash, coinbase in ommers:
            rewards[ommer_hash] = coinbase

        if len(rewards) != block.ommer_count:
            logger.warning(
                f"block {block.number} declares {block.ommer_count} uncles "
                f"but the canonical body has {len(rewards)}"
            )
        return tuple(UncleRewardEntry(h, c) for h, c in rewards.items())
