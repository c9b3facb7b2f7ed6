# =============================================================================
# classroom_core/ranking/tiers.py
# Codetrio ranking tiers
# =============================================================================
"""
Four fixed ranking tiers keyed on a point score.

Ranges are half-open ``[min_points, max_points)`` and laid end to end
starting at zero, so every non-negative score has exactly one tier.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class RankTier(str, Enum):
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"
    MASTER = "master"


@dataclass(frozen=True)
class TierConfig:
    label: str
    icon: str
    css_class: str
    color: str
    min_points: int
    max_points: Optional[int]  # exclusive; None = no upper bound
    range_label: str

    def contains(self, points: int) -> bool:
        if points < self.min_points:
            return False
        return self.max_points is None or points < self.max_points


TIER_CONFIG: Dict[RankTier, TierConfig] = {
    RankTier.SILVER: TierConfig(
        label="Bạc",
        icon="🏅",
        css_class="ct-rank-silver",
        color="#94a3b8",
        min_points=0,
        max_points=1100,
        range_label="< 1100 điểm",
    ),
    RankTier.GOLD: TierConfig(
        label="Vàng",
        icon="🏆",
        css_class="ct-rank-gold",
        color="#eab308",
        min_points=1100,
        max_points=1300,
        range_label="1100-1299 điểm",
    ),
    RankTier.DIAMOND: TierConfig(
        label="Kim cương",
        icon="💎",
        css_class="ct-rank-diamond",
        color="#06b6d4",
        min_points=1300,
        max_points=1500,
        range_label="1300-1499 điểm",
    ),
    RankTier.MASTER: TierConfig(
        label="Cao thủ",
        icon="👑",
        css_class="ct-rank-master",
        color="#a855f7",
        min_points=1500,
        max_points=None,
        range_label="1500+ điểm",
    ),
}

# Example scores shown on the dashboard's ranking card
SHOWCASE_POINTS: Dict[RankTier, int] = {
    RankTier.SILVER: 950,
    RankTier.GOLD: 1200,
    RankTier.DIAMOND: 1400,
    RankTier.MASTER: 1650,
}


def tier_config(tier: Union[RankTier, str]) -> TierConfig:
    """
    Raises:
        ValueError: for an unknown tier name
    """
    return TIER_CONFIG[RankTier(tier)]


def tier_for_points(points: int) -> RankTier:
    """
    Tier whose range contains ``points``.

    Raises:
        ValueError: for negative scores
    """
    if points < 0:
        raise ValueError(f"Points must be non-negative, got {points}")
    for tier, config in TIER_CONFIG.items():
        if config.contains(points):
            return tier
    raise ValueError(f"No tier covers {points} points")  # unreachable while ranges are contiguous
