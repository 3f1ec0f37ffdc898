import sys
import types


def getname(obj):
    """
    Return the most qualified name of an object

    :param obj: object to fetch name
    :return: name of ``obj``
    """
    for name_attribute in ('__qualname__', '__name__'):
        try:
            # an object always has a class, as per Python data model
            return getattr(obj, name_attribute, getattr(obj.__class__, name_attribute))
        except AttributeError:
            pass
    raise TypeError('object of type %r does not define a canonical name' % type(obj))


class WrapperMixin(object):
    r"""
    Mixin for objects that wrap a factory of sequences

    Apply as a mixin via multiple inheritance:

    .. code:: python

        class Replay(WrapperMixin, object):
            /"/"/"Sequence that calls ``factory`` for each iteration/"/"/"
            def __init__(self, factory, *args):
                super().__init__(factory=factory)
                self.args = args

            def __iter__(self):
                return iter(self.__wrapped__(*self.args))

    Wrappers bind their factory to ``__wrapped__``, as is the Python standard,
    and also expose it via the ``factory`` property for convenience.

    Additionally, subclasses provide the :py:meth:`~.wraplet` to bind the wrapper to a
    specific factory.
    """
    def __init__(self, factory):
        super(WrapperMixin, self).__init__()
        self.__wrapped__ = factory

    @property
    def factory(self):
        return self.__wrapped__

    def __wraplet_repr__(self):
        """repr for instances of wraplets"""
        return '<%s.%s wraplet at %x>' % (self.__module__, self.__class__.__qualname__, id(self))

    @classmethod
    def wraplet(cls, factory):
        """
        Create a subclass of the wrapper permanently bound to ``factory``

        :param factory: the factory to bind
        :return: wrapper type taking only the arguments for ``factory``

        .. code:: python

            bound_wrapper = cls.wraplet(factory)
            wrapper = bound_wrapper(*factory_args, **factory_kwargs)
            # is equivalent to
            wrapper = cls(factory, *factory_args, **factory_kwargs)
        """
        class Wraplet(cls):  # pylint:disable=abstract-method
            _factory = staticmethod(factory)
            # Assign the wrapped attributes directly instead of
            # using functools.wraps, as we may deal with arbitrary
            # class/callable combinations.
            __doc__ = factory.__doc__
            # While the wrapped instance wraps the factory, the
            # wrapper class wraps the factory as well. Any instance
            # then just hides the class level attribute.
            # Exposing __wrapped__ here allows introspection, such
            # as inspect.signature, to pick up metadata.
            __wrapped__ = factory
            # Objects without any annotations just provide an empty dict.
            __annotations__ = getattr(factory, '__annotations__', {})

            def __init__(self, /, *args, **kwargs):
                super(Wraplet, self).__init__(self._factory, *args, **kwargs)

            __repr__ = cls.__wraplet_repr__

        # swap places with our target so that both can be pickled/unpickled
        Wraplet.__name__ = getname(factory).split('.')[-1]
        Wraplet.__qualname__ = getname(factory)
        Wraplet.__module__ = getattr(factory, '__module__', None) or cls.__module__
        # When used as a decorator, the wraplet replaces the factory in its module.
        # Pickle looks up objects by their qualified name, so we let the factory
        # point to its place on the wraplet instead.
        # There are two cases we have to check here:
        # wraplet = cls.wraplet(factory)
        #   The factory already exists in the module namespace, with its __name__.
        #   The object with that name is *identical* to the factory, pickle finds it.
        # @cls.wraplet\ndef factory
        #   Neither factory nor wraplet exist in the namespace yet (they are only bound *after*
        #   the wraplet returns). The factory must be found via the wraplet.
        if isinstance(factory, types.FunctionType):
            module = sys.modules.get(factory.__module__)
            if getattr(module, factory.__name__, None) is not factory:
                factory.__qualname__ = Wraplet.__qualname__ + '._factory'
        return Wraplet
