from typing import NamedTuple, Optional, Tuple, Dict

from ethereumreward.domain.wei import Wei


class UncleRewardEntry(NamedTuple):
    hash: str
    coinbase: str


class MinerDataResult(NamedTuple):
    net_block_reward: Wei
    static_block_reward: Wei
    transaction_fee: Wei
    uncle_inclusion_reward: Wei
    uncle_rewards: Tuple[UncleRewardEntry, ...]
    coinbase: Optional[str]
    extra_data: Optional[str]
    difficulty: Optional[int]
    total_difficulty: Optional[int]
    # transactions whose receipt was absent, counted as zero gas used
    missing_receipts: Tuple[str, ...] = ()

    @property
    def uncle_reward_map(self) -> Dict[str, str]:
        return {e.hash: e.coinbase for e in self.uncle_rewards}

    @property
    def is_partial(self) -> bool:
        return len(self.missing_receipts) > 0


# hint: this class is not Enum
class LookupStatus:
    FOUND = "found"
    NOT_FOUND = "not_found"
    WORLD_STATE_UNAVAILABLE = "world_state_unavailable"


class MinerDataLookup(NamedTuple):
    status: str
    result: Optional[MinerDataResult] = None

    @classmethod
    def found(cls, result: MinerDataResult) -> "MinerDataLookup":
        return cls(LookupStatus.FOUND, result)

    @classmethod
    def not_found(cls) -> "MinerDataLookup":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def world_state_unavailable(cls) -> "MinerDataLookup":
        return cls(LookupStatus.WORLD_STATE_UNAVAILABLE)
