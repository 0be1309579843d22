"""
Notation-specific parsers and emitters.
"""

from .go import GoStructEmitter, GoStructParser, TagSynthesizer
from .typescript import TsInterfaceEmitter, TsInterfaceParser

__all__ = [
    "GoStructEmitter",
    "GoStructParser",
    "TagSynthesizer",
    "TsInterfaceEmitter",
    "TsInterfaceParser",
]
