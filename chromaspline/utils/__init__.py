from .hue import wrap_hue, hue_delta, hue_lerp, unwrap_hues, hue_distance

__all__ = [
    "wrap_hue",
    "hue_delta",
    "hue_lerp",
    "unwrap_hues",
    "hue_distance",
]
