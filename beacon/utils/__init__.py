"""
Shared utilities for BEACON.

Common functionality used across contexts:
- Text processing
- Vocabulary configuration
- Logging setup
- Timestamps
"""

from beacon.utils.timestamp import now
from beacon.utils.vocabulary import Vocabulary, default_vocabulary, load_vocabulary

__all__ = ["Vocabulary", "default_vocabulary", "load_vocabulary", "now"]
