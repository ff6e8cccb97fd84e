import logging
from typing import Union, Optional, Callable

from ethereumreward.domain.block import EthBlock
from ethereumreward.domain.miner_data import MinerDataLookup
from ethereumreward.service.block_reward_calculator import EthBlockRewardCalculator
from ethereumreward.service.blockchain_queries import EthBlockchainQueries
from ethereumreward.service.protocol_schedule import ProtocolSchedule

logger = logging.getLogger(__name__)


class EthMinerDataService(object):
    def __init__(
        self,
        blockchain_queries: EthBlockchainQueries,
        protocol_schedule: ProtocolSchedule,
        calculator: Optional[EthBlockRewardCalculator] = None,
    ):
        self.blockchain_queries = blockchain_queries
        self.protocol_schedule = protocol_schedule
        self.calculator = calculator or EthBlockRewardCalculator()

    def get_miner_data_by_hash(self, block_hash: str) -> MinerDataLookup:
        return self._get_miner_data(
            lambda: self.blockchain_queries.block_by_hash(block_hash)
        )

    def get_miner_data_by_number(
        self, block_number: Union[int, str]
    ) -> MinerDataLookup:
        return self._get_miner_data(
            lambda: self.blockchain_queries.block_by_number(block_number)
        )

    def _get_miner_data(
        self, resolve_block: Callable[[], Optional[EthBlock]]
    ) -> MinerDataLookup:
        block = resolve_block()
        if block is None:
            return MinerDataLookup.not_found()

        if not self.blockchain_queries.is_world_state_available(block):
            return MinerDataLookup.world_state_unavailable()

        return MinerDataLookup.found(self.create_miner_data_result(block))

    def create_miner_data_result(self, block: EthBlock):
        static_reward = self.protocol_schedule.static_block_reward(block.number)
        receipts = self.blockchain_queries.transaction_receipts_gas_used(
            tx.hash for tx in block.transactions
        )
        result = self.calculator.calculate(
            block,
            static_reward,
            fee_lookup=receipts.get,
            ommer_coinbase_lookup=self.blockchain_queries.ommers_by_number,
        )
        logger.debug(
            f"block {block.number} net reward {result.net_block_reward} "
            f"(static {static_reward}, fee {result.transaction_fee}, "
            f"uncle inclusion {result.uncle_inclusion_reward})"
        )
        return result
