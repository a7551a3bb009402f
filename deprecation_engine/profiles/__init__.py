"""
Built-in platform profiles, in registry order (the first one is the default).
"""

from .react import REACT_19
from .node import NODE_24
from .angular import ANGULAR_2026
from .vue import VUE_5

BUILTIN_PROFILES = (REACT_19, NODE_24, ANGULAR_2026, VUE_5)

__all__ = [
    'REACT_19',
    'NODE_24',
    'ANGULAR_2026',
    'VUE_5',
    'BUILTIN_PROFILES',
]
