"""
Rewindable generators by replaying their creation

Generators and most iterators can be traversed only once - there is no way
to restart a suspended generator from the top.
A :py:class:`RewindableGenerator` works around this by not wrapping a live generator,
but the *recipe* to create it: a factory and the arguments to call it with.
Whenever iteration starts over, the factory is simply called again.

Any generator function, iterator type or other callable returning an iterable
can be made rewindable:

.. code:: python

    def countdown(start):
        while start > 0:
            yield start
            start -= 1

    launch = RewindableGenerator(countdown, 3)
    print(list(launch))  # [3, 2, 1]
    print(list(launch))  # [3, 2, 1]

If a factory is always used as a rewindable, one may permanently convert it by
applying :py:func:`make_rewindable` as a decorator:

.. code:: python

    @make_rewindable
    def countdown(start):
        # ...

    launch = countdown(3)

Since the sequence is created anew on every rewind, any side effects of the
factory and its sequence are repeated as well.
Rewinding is only meaningful for factories which produce the same sequence
when called with the same arguments.
"""
import logging

from . import wrapper
from .cursor import Cursor


_logger = logging.getLogger(__name__)


def _unpickle_rewindable(cls, factory, args, kwargs):
    return cls(factory, *args, **kwargs)


def _unpickle_wraplet(cls, args, kwargs):
    return cls(*args, **kwargs)


class RewindableGenerator(wrapper.WrapperMixin):
    """
    A generator that can be rewound to replay its elements from the start

    :param factory: callable creating the sequence, such as a :term:`generator` function
    :type factory: callable
    :param args: positional arguments to pass to ``factory``
    :param kwargs: keyword arguments to pass to ``factory``

    The following two calls produce the same elements on first iteration:

    .. code::

        my_generator(1, 2, 3, foo='bar')
        RewindableGenerator(my_generator, 1, 2, 3, foo='bar')

    However, a :py:class:`RewindableGenerator` can be iterated again after
    calling :py:meth:`rewind`. Creating the sequence is deferred until
    it is actually used: neither instantiation nor :py:meth:`rewind` call ``factory``.

    Elements can be consumed via the regular iterator protocol, or explicitly
    via the cursor methods :py:meth:`valid`, :py:meth:`key`, :py:meth:`current`
    and :py:meth:`advance`. Like a ``foreach`` loop, ``iter(rewindable)`` rewinds
    before returning the rewindable itself, so every ``for`` loop starts from the top:

    .. code::

        digits = RewindableGenerator(range, 3)
        print(next(digits))  # 0
        print(list(digits))  # [0, 1, 2]

    :note: A :py:class:`RewindableGenerator` holds a single sequence at any time.
           Iterating the same instance in several places at once, for example
           ``zip(digits, digits)``, interleaves them on the same sequence.
           Create separate instances for independent iteration.
    """
    def __init__(self, factory, /, *args, **kwargs):
        super(RewindableGenerator, self).__init__(factory)
        self._args = args
        self._kwargs = kwargs
        self._inner = None

    @property
    def args(self):
        """The positional arguments passed to the factory"""
        return self._args

    @property
    def kwargs(self):
        """The keyword arguments passed to the factory"""
        return self._kwargs.copy()

    @property
    def is_active(self):
        """Whether the sequence has been created since construction or the last rewind"""
        return self._inner is not None

    def _realize(self):
        _logger.debug('realizing %r', self)
        # only store the sequence once creation has succeeded
        inner = Cursor(self.__wrapped__(*self._args, **self._kwargs))
        self._inner = inner
        return inner

    def _active_cursor(self):
        inner = self._inner
        if inner is None:
            inner = self._realize()
        return inner

    def rewind(self):
        """Discard the current sequence, so that it is created again on next use"""
        if self._inner is not None:
            _logger.debug('rewinding %r', self)
            self._inner = None

    # cursor interface
    def valid(self):
        """Whether there is a current element"""
        return self._active_cursor().valid()

    def key(self):
        """The position of the current element"""
        return self._active_cursor().key()

    def current(self):
        """The current element"""
        return self._active_cursor().current()

    def advance(self):
        """Move to the next element, if any"""
        self._active_cursor().advance()

    # iterator interface
    def __iter__(self):
        self.rewind()
        return self

    def __next__(self):
        """Implement next(self)"""
        cursor = self._active_cursor()
        if not cursor.valid():
            raise StopIteration
        value = cursor.current()
        cursor.advance()
        return value

    # generator interface
    def send(self, value=None):
        """
        send(value) -> send 'value' into generator,
        return next yielded value or raise StopIteration.

        If the generator is not suspended at a ``yield`` yet, it is first
        advanced to its first ``yield``, which is skipped.
        """
        return self._active_cursor().send(value)

    def throw(self, exception):
        """
        throw(exception) -> raise exception in generator,
        return next yielded value or raise StopIteration.

        If the generator is not suspended at a ``yield`` yet, it is first
        advanced to its first ``yield``, which is skipped.
        """
        return self._active_cursor().throw(exception)

    def close(self):
        """close() -> raise GeneratorExit inside generator, if it has been created."""
        if self._inner is not None:
            self._inner.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # only the recipe can be copied, not a running generator
    def __reduce__(self):
        if self._inner is not None:
            raise TypeError('%s objects cannot be copied or pickled while active' % type(self).__name__)
        # wraplets are bound to their factory already
        if hasattr(type(self), '_factory'):
            return _unpickle_wraplet, (type(self), self._args, self._kwargs)
        return _unpickle_rewindable, (type(self), self.__wrapped__, self._args, self._kwargs)

    def __repr__(self):
        if self._inner is not None:
            return '%s(%r)' % (type(self).__name__, self._inner)
        return '%s(%s, *%s, **%s)' % (
            type(self).__name__, wrapper.getname(self.__wrapped__), self._args, self._kwargs
        )

    def __wraplet_repr__(self):
        if self._inner is not None:
            return '%s(%r)' % (type(self).__qualname__, self._inner)
        return '%s(*%s, **%s)' % (type(self).__qualname__, self._args, self._kwargs)


def make_rewindable(factory):
    """
    Convert a factory of sequences to a factory of :py:class:`~.RewindableGenerator`

    :param factory: the factory to convert, such as a :term:`generator` function
    :type factory: callable
    :returns: subclass of :py:class:`~.RewindableGenerator` bound to ``factory``

    .. code:: python

        rewindable_map = make_rewindable(map)
        tripled = rewindable_map(lambda x: x * 3, [1, 2, 3])
        # tripled is a rewindable iterator with elements [3, 6, 9]

    This function can also be used as a decorator:

    .. code:: python

        @make_rewindable
        def naturals():
            "Produce all natural numbers"
            value = 1
            while True:
                yield value
                value += 1
    """
    return RewindableGenerator.wraplet(factory)


def call_rewindable(factory, /, *args, **kwargs):
    """
    Call a factory of sequences, but make the result rewindable

    :param factory: the factory to call, such as a :term:`generator` function
    :type factory: callable
    :param args: positional arguments to pass to ``factory``
    :param kwargs: keyword arguments to pass to ``factory``
    :returns: the rewindable result of ``factory(*args, **kwargs)``
    :rtype: RewindableGenerator

    This is the one-off version of :py:func:`make_rewindable`:

    .. code:: python

        tripled = call_rewindable(map, lambda x: x * 3, [1, 2, 3])
        # tripled is a rewindable iterator with elements [3, 6, 9]
    """
    return RewindableGenerator(factory, *args, **kwargs)
