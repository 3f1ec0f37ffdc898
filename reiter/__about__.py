"""
++++++
reiter
++++++

The ``reiter`` library makes single-pass generators and iterators rewindable.
Instead of buffering every element, ``reiter`` remembers *how* a sequence was created
and simply creates it again whenever iteration starts over:

.. code:: python

    # regular generators can be consumed only once
    squares = map(square, range(10))
    list(squares)  # [0, 1, 4, ...]
    list(squares)  # []
    # rewindable sequences are replayed from the start
    squares = reiter.call_rewindable(map, square, range(10))
    list(squares)  # [0, 1, 4, ...]
    list(squares)  # [0, 1, 4, ...]

Making your own generators rewindable is simple, requiring only a decorator:

.. code:: python

    @reiter.make_rewindable
    def fibonacci():
        a, b = 0, 1
        while True:
            yield a
            a, b = b, a + b

Features
========

* Replay generators, builtins and ``itertools`` without materializing them.
* Infinite sequences stay infinite and rewindable, in constant memory.
* Explicit cursor interface with ``valid``, ``key``, ``current``, ``advance`` and ``rewind``.
* Generator-compatible ``send``, ``throw`` and ``close``.
* Rewindable versions of all lazy builtins and ``itertools`` in :py:mod:`reiter.rewindable`.

Since sequences are re-created instead of buffered, any side effects of a sequence
happen again on every replay. Rewinding is only meaningful for sequences which
produce the same elements when created with the same arguments.
"""

__title__ = 'reiter'
__summary__ = 'Rewindable generators and iterators by replaying their creation'

__version__ = '1.0.0'
__author__ = 'reiter developers'
__copyright__ = '2026 %s' % __author__
