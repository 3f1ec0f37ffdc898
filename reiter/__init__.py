import logging

from .rewind import RewindableGenerator, make_rewindable, call_rewindable
from .cursor import Cursor
from .signals import CursorExhausted

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'RewindableGenerator',
    'make_rewindable', 'call_rewindable',
    'Cursor', 'CursorExhausted',
]
