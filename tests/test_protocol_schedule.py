import pytest

from blockchainreward.enumeration.chain import Chain
from ethereumreward.service.protocol_schedule import (
    ETHER,
    ClassicSchedule,
    MilestoneSchedule,
    protocol_schedule_for_chain,
)


@pytest.mark.parametrize(
    "block_number, reward",
    [
        (0, 5 * ETHER),
        (4369999, 5 * ETHER),
        (4370000, 3 * ETHER),
        (7279999, 3 * ETHER),
        (7280000, 2 * ETHER),
        (15537393, 2 * ETHER),
        (15537394, 0),
    ],
)
def test_mainnet_schedule(block_number, reward):
    schedule = protocol_schedule_for_chain(Chain.ETHEREUM)
    assert schedule.static_block_reward(block_number) == reward


def test_ethw_keeps_rewarding_after_the_merge():
    schedule = protocol_schedule_for_chain(Chain.ETHW)
    assert schedule.static_block_reward(15537394) == 2 * ETHER
    assert schedule.static_block_reward(16000000) == 2 * ETHER


@pytest.mark.parametrize(
    "block_number, reward",
    [
        (0, 5 * ETHER),
        (5000000, 5 * ETHER),
        (5000001, 4 * ETHER),
        (10000001, 32 * ETHER // 10),
        (15000001, 256 * ETHER // 100),
    ],
)
def test_classic_schedule(block_number, reward):
    schedule = protocol_schedule_for_chain(Chain.ETHC)
    assert isinstance(schedule, ClassicSchedule)
    assert schedule.static_block_reward(block_number) == reward


def test_custom_chain_requires_schedule_file():
    with pytest.raises(ValueError):
        protocol_schedule_for_chain(Chain.CUSTOM)


def test_schedule_from_file(tmp_path):
    schedule_file = tmp_path / "schedule.yaml"
    schedule_file.write_text(
        """
milestones:
  - block: 0
    reward: 5000000000000000000
  - block: 100
    reward: "0x1bc16d674ec80000"
"""
    )
    schedule = protocol_schedule_for_chain(Chain.CUSTOM, str(schedule_file))
    assert schedule.static_block_reward(99) == 5 * ETHER
    assert schedule.static_block_reward(100) == 2 * ETHER


@pytest.mark.parametrize(
    "milestones",
    [
        [],
        [(1, ETHER)],
        [(0, ETHER), (10, ETHER), (10, 0)],
        [(0, ETHER), (10, ETHER), (5, 0)],
    ],
)
def test_invalid_milestones(milestones):
    with pytest.raises(ValueError):
        MilestoneSchedule(milestones)


@pytest.mark.parametrize(
    "milestone",
    [
        {"block": 0, "reward": -1},
        {"block": 0},
        {"reward": ETHER},
        {"block": "zero", "reward": ETHER},
        {"block": 0, "reward": None},
        {"block": 0, "reward": 2**256},
        "0: 5000000000000000000",
    ],
)
def test_invalid_milestone_in_file(milestone):
    with pytest.raises(ValueError, match="invalid milestone"):
        MilestoneSchedule.load({"milestones": [milestone]})


def test_largest_milestone_reward():
    milestones = [{"block": 0, "reward": 2**256 - 1}]
    schedule = MilestoneSchedule.load({"milestones": milestones})
    assert schedule.static_block_reward(1) == 2**256 - 1


def test_negative_block_number():
    with pytest.raises(ValueError):
        protocol_schedule_for_chain(Chain.ETHEREUM).static_block_reward(-1)
