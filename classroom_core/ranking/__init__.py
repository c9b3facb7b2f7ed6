from .tiers import RankTier, TierConfig, TIER_CONFIG, tier_config, tier_for_points, SHOWCASE_POINTS

__all__ = ["RankTier", "TierConfig", "TIER_CONFIG", "tier_config", "tier_for_points", "SHOWCASE_POINTS"]
