"""Character, word and line frequency counting."""

from .counting import count
from .models import CountMode, FrequencyTable

__version__ = "0.1.0"

__all__ = ["count", "CountMode", "FrequencyTable", "__version__"]
