"""Foundation layer: errors, normalization, configuration."""

from .config import ResultkitSettings, clear_settings_cache, get_settings
from .errors import NormalizedError, Rejection, UnwrapError, capture, normalize_error

__all__ = [
    "ResultkitSettings", "get_settings", "clear_settings_cache",
    "NormalizedError", "Rejection", "UnwrapError", "normalize_error", "capture",
]
