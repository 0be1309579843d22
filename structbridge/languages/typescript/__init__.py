"""
TypeScript interface support.
"""

from .emitter import TsInterfaceEmitter
from .parser import TsInterfaceParser

__all__ = ["TsInterfaceEmitter", "TsInterfaceParser"]
