from .num_utils import round_half_up
from .callbacks import join_callbacks, Callback

__all__ = [
    "round_half_up",
    "join_callbacks",
    "Callback",
]
