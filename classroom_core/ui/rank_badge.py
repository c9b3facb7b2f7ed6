"""
Ranking badge: a pure ``(tier, points, size) -> HTML`` renderer.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import Dict, Union

from classroom_core.ranking import RankTier, tier_config


class BadgeSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"


@dataclass(frozen=True)
class SizeStyle:
    font_size: str
    padding: str
    icon_size: str


SIZE_STYLES: Dict[BadgeSize, SizeStyle] = {
    BadgeSize.SM: SizeStyle(font_size="0.75rem", padding="0.25rem 0.5rem", icon_size="0.75rem"),
    BadgeSize.MD: SizeStyle(font_size="0.875rem", padding="0.25rem 0.75rem", icon_size="1rem"),
    BadgeSize.LG: SizeStyle(font_size="1rem", padding="0.5rem 1rem", icon_size="1.25rem"),
}


def render_rank_badge(
    tier: Union[RankTier, str],
    points: int,
    size: Union[BadgeSize, str] = BadgeSize.MD,
) -> str:
    """
    HTML for a ranking badge. The tier is taken as given, never derived
    from ``points``.

    Raises:
        ValueError: for an unknown tier or size
    """
    config = tier_config(tier)
    style = SIZE_STYLES[BadgeSize(size)]
    title = escape(f"{config.label} - {config.range_label}", quote=True)
    return (
        f'<span class="ct-rank {config.css_class}" title="{title}" '
        f'style="font-size:{style.font_size};padding:{style.padding};">'
        f'<span class="ct-rank-icon" style="font-size:{style.icon_size};">{config.icon}</span>'
        f"{escape(config.label)}"
        f'<span class="ct-rank-points">({int(points)})</span>'
        f"</span>"
    )

