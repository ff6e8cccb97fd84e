import logging
from bisect import bisect_right
from typing import List, Tuple, Dict, Any

import yaml

from blockchainreward.enumeration.chain import Chain
from ethereumreward.domain.wei import Wei, UINT256_MAX

logger = logging.getLogger(__name__)

ETHER = 10**18

BYZANTIUM_BLOCK = 4370000
CONSTANTINOPLE_BLOCK = 7280000
PARIS_BLOCK = 15537394

# ECIP-1017
CLASSIC_ERA_LENGTH = 5000000


class ProtocolSchedule(object):
    def static_block_reward(self, block_number: int) -> Wei:
        raise NotImplementedError()


class MilestoneSchedule(ProtocolSchedule):
    """Static block reward looked up by the last milestone at or below a height."""

    def __init__(self, milestones: List[Tuple[int, int]]):
        if len(milestones) == 0:
            raise ValueError("reward schedule requires at least one milestone")

        blocks = [block for block, _ in milestones]
        if blocks[0] != 0:
            raise ValueError("the first milestone must activate at block 0")
        if any(b1 >= b2 for b1, b2 in zip(blocks, blocks[1:])):
            raise ValueError(f"milestones must be strictly increasing: {blocks}")

        self._blocks = blocks
        self._rewards = [Wei(reward) for _, reward in milestones]

    def static_block_reward(self, block_number: int) -> Wei:
        if block_number < 0:
            raise ValueError(f"block number must be positive, got {block_number}")
        return self._rewards[bisect_right(self._blocks, block_number) - 1]

    @classmethod
    def load(cls, yaml_dict: Dict[str, Any]) -> "MilestoneSchedule":
        milestones = []
        for item in yaml_dict.get("milestones") or []:
            try:
                block, reward = int(item["block"]), int(str(item["reward"]), 0)
            except (KeyError, TypeError, ValueError):
                raise ValueError(f"invalid milestone: {item}")
            if block < 0 or not 0 <= reward <= UINT256_MAX:
                raise ValueError(f"invalid milestone: {item}")
            milestones.append((block, reward))
        return cls(milestones)

    @classmethod
    def from_file(cls, schedule_file: str) -> "MilestoneSchedule":
        with open(schedule_file) as fr:
            yaml_dict = yaml.safe_load(fr)
        if not isinstance(yaml_dict, dict):
            raise ValueError(f"reward schedule {schedule_file} is not a mapping")
        schedule = cls.load(yaml_dict)
        logger.info(
            f"loaded reward schedule from {schedule_file} "
            f"with {len(schedule._blocks)} milestones"
        )
        return schedule


class ClassicSchedule(ProtocolSchedule):
    """Ethereum Classic, the reward drops by 20% at each 5M blocks era."""

    def __init__(self, base_reward: int = 5 * ETHER, era_length=CLASSIC_ERA_LENGTH):
        self._base_reward = base_reward
        self._era_length = era_length

    def era(self, block_number: int) -> int:
        if block_number <= 0:
            return 0
        return (block_number - 1) // self._era_length

    def static_block_reward(self, block_number: int) -> Wei:
        if block_number < 0:
            raise ValueError(f"block number must be positive, got {block_number}")
        era = self.era(block_number)
        return Wei(self._base_reward * 4**era // 5**era)


MAINNET_MILESTONES = [
    (0, 5 * ETHER),
    (BYZANTIUM_BLOCK, 3 * ETHER),
    (CONSTANTINOPLE_BLOCK, 2 * ETHER),
    (PARIS_BLOCK, 0),
]

ETHW_MILESTONES = MAINNET_MILESTONES[:-1]


def protocol_schedule_for_chain(chain: str, schedule_file=None) -> ProtocolSchedule:
    if schedule_file is not None:
        return MilestoneSchedule.from_file(schedule_file)

    if chain == Chain.ETHEREUM:
        return MilestoneSchedule(MAINNET_MILESTONES)
    elif chain == Chain.ETHW:
        return MilestoneSchedule(ETHW_MILESTONES)
    elif chain == Chain.ETHC:
        return ClassicSchedule()
    else:
        raise ValueError(f"chain {chain} requires a reward schedule file")
