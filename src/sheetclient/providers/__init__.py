from .base import BaseSheetProvider
from .google import GoogleSheetProvider

__all__ = [
    "BaseSheetProvider",
    "GoogleSheetProvider",
]
