"""
Explicit cursors over single-pass iterators

Python iterators only support fetching the :py:func:`next` element.
A :py:class:`Cursor` adds a lookahead of one element, exposing the
iterator as a sequence with a *current* element:

.. code:: python

    cursor = Cursor(['a', 'b'])
    while cursor.valid():
        print(cursor.key(), cursor.current())  # prints 0 a, 1 b
        cursor.advance()

The underlying iterator is advanced lazily: it is only asked for an element
once the cursor is inspected, or advanced past an element it has not fetched yet.
"""
from .signals import CursorExhausted
from .utility import UNPRIMED, EXHAUSTED


class Cursor(object):
    """
    Cursor over the elements of an iterable

    :param iterable: the elements to visit
    :type iterable: iterable

    The key of each element is its position, starting at ``0``.
    Any exception raised by the underlying iterator is propagated as-is.
    """
    __slots__ = ('_iterator', '_current', '_position')

    def __init__(self, iterable):
        self._iterator = iter(iterable)
        self._current = UNPRIMED
        self._position = -1

    @property
    def iterator(self):
        """The underlying iterator"""
        return self._iterator

    def _fetch(self):
        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = EXHAUSTED
        except BaseException:
            # a generator which raised is finished
            self._current = EXHAUSTED
            raise
        else:
            self._position += 1

    def _prime(self):
        if self._current is UNPRIMED:
            self._fetch()

    def valid(self):
        """Whether there is a current element"""
        self._prime()
        return self._current is not EXHAUSTED

    def key(self):
        """The position of the current element"""
        if not self.valid():
            raise CursorExhausted('no current element to get the key of')
        return self._position

    def current(self):
        """The current element"""
        if not self.valid():
            raise CursorExhausted('no current element')
        return self._current

    def advance(self):
        """Move to the next element, if any"""
        self._prime()
        if self._current is not EXHAUSTED:
            # the next element is fetched on demand
            self._current = UNPRIMED

    def _resume(self, method_name, argument):
        try:
            resume = getattr(self._iterator, method_name)
        except AttributeError:
            raise TypeError(
                '%s of %r cannot be resumed via %s' % (type(self).__name__, self._iterator, method_name)
            )
        self._prime()
        if self._current is EXHAUSTED:
            raise StopIteration
        try:
            self._current = resume(argument)
        except BaseException:
            self._current = EXHAUSTED
            raise
        self._position += 1
        return self._current

    def send(self, value=None):
        """
        Resume a generator at its current ``yield`` with ``value``

        :returns: the next element yielded by the generator
        :raises StopIteration: if the generator finishes
        """
        return self._resume('send', value)

    def throw(self, exception):
        """
        Resume a generator at its current ``yield`` by raising ``exception``

        :returns: the next element yielded by the generator
        :raises StopIteration: if the generator finishes

        Any exception not handled inside the generator is propagated.
        """
        return self._resume('throw', exception)

    def close(self):
        """Close the underlying iterator, dropping all remaining elements"""
        close = getattr(self._iterator, 'close', None)
        try:
            if close is not None:
                close()
        finally:
            self._current = EXHAUSTED

    def __repr__(self):
        if self._current is UNPRIMED:
            state = 'unprimed'
        elif self._current is EXHAUSTED:
            state = 'exhausted'
        else:
            state = '%d: %r' % (self._position, self._current)
        return '<%s over %r, %s>' % (type(self).__name__, self._iterator, state)
