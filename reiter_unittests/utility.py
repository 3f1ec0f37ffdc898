class CallCounter(object):
    """Callable counting how often it has been called"""
    def __init__(self, function=None):
        self.function = function if function is not None else (lambda value: value)
        self.calls = 0

    def __call__(self, *args, **kwargs):
        self.calls += 1
        return self.function(*args, **kwargs)


def counter_generator(*args, **kwargs):
    for arg in args:
        yield arg
    for item in sorted(kwargs.items()):
        yield item


def pingpong(start=None):
    """Generator echoing every value sent to it"""
    last = yield start
    while True:
        last = yield last


def fail_on(value, iterable, error=ValueError):
    """Generator producing items from ``iterable`` but raising on ``value``"""
    for item in iterable:
        if item == value:
            raise error(item)
        yield item


def drain(cursor):
    """Consume all elements of a cursor as ``(key, value)`` pairs"""
    result = []
    while cursor.valid():
        result.append((cursor.key(), cursor.current()))
        cursor.advance()
    return result
