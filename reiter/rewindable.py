"""
Rewindable versions of the lazy builtins and :py:mod:`itertools`

Every function of this module is a pre-bound :py:class:`~reiter.rewind.RewindableGenerator`,
taking the same arguments as its regular counterpart:

.. code::

    from reiter import rewindable

    tripled = rewindable.map(lambda x: x * 3, [1, 2, 3])
    print(list(tripled))  # [3, 6, 9]
    print(list(tripled))  # [3, 6, 9]

Arguments are stored as they are, and used again on every rewind.
Iterables passed as arguments must therefore support repeated iteration
themselves - for example a :py:class:`list` or another rewindable.
Passing a plain iterator works for the first iteration only.
"""
import builtins
import itertools

from .rewind import RewindableGenerator, make_rewindable


def _prebound(factory, name):
    rewindable = make_rewindable(factory)
    rewindable.__name__ = rewindable.__qualname__ = name
    rewindable.__module__ = __name__
    return rewindable


def _require_replay(iterable, position):
    if isinstance(iterable, RewindableGenerator):
        return
    if iter(iterable) is iterable:
        raise TypeError(
            'product() argument %d must be rewindable or re-iterable, not a single-pass %s' % (
                position, type(iterable).__name__
            )
        )


def _product(*iterables):
    """
    Cartesian product of iterables, replaying instead of buffering them

    Unlike :py:func:`itertools.product`, the iterables are not stored in memory
    but iterated anew for each combination of the preceding ones. All iterables
    but the first must be rewindable or re-iterable. The last iterable may be
    infinite.
    """
    for position, iterable in builtins.enumerate(iterables[1:], start=2):
        _require_replay(iterable, position)
    return _product_tail(iterables, ())


def _product_tail(iterables, prefix):
    if not iterables:
        yield prefix
        return
    head, tail = iterables[0], iterables[1:]
    for item in head:
        for combination in _product_tail(tail, prefix + (item,)):
            yield combination


# builtins
range = _prebound(builtins.range, 'range')
map = _prebound(builtins.map, 'map')
filter = _prebound(builtins.filter, 'filter')
enumerate = _prebound(builtins.enumerate, 'enumerate')
zip = _prebound(builtins.zip, 'zip')
reversed = _prebound(builtins.reversed, 'reversed')
# itertools
chain = _prebound(itertools.chain, 'chain')
chain_from_iterable = _prebound(itertools.chain.from_iterable, 'chain_from_iterable')
islice = _prebound(itertools.islice, 'islice')
takewhile = _prebound(itertools.takewhile, 'takewhile')
dropwhile = _prebound(itertools.dropwhile, 'dropwhile')
filterfalse = _prebound(itertools.filterfalse, 'filterfalse')
starmap = _prebound(itertools.starmap, 'starmap')
zip_longest = _prebound(itertools.zip_longest, 'zip_longest')
accumulate = _prebound(itertools.accumulate, 'accumulate')
compress = _prebound(itertools.compress, 'compress')
count = _prebound(itertools.count, 'count')
cycle = _prebound(itertools.cycle, 'cycle')
repeat = _prebound(itertools.repeat, 'repeat')
pairwise = _prebound(itertools.pairwise, 'pairwise')
batched = _prebound(itertools.batched, 'batched')
# replaying combinators
product = _prebound(_product, 'product')

__all__ = [
    'range', 'map', 'filter', 'enumerate', 'zip', 'reversed',
    'chain', 'chain_from_iterable', 'islice', 'takewhile', 'dropwhile', 'filterfalse',
    'starmap', 'zip_longest', 'accumulate', 'compress', 'count', 'cycle', 'repeat',
    'pairwise', 'batched',
    'product',
]
