from .colors import COLOR_NAMES

__all__ = ["COLOR_NAMES"]
