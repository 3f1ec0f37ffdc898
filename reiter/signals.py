class CursorExhausted(LookupError):
    """
    Access to the current element of a cursor without elements

    Raised by :py:meth:`~reiter.cursor.Cursor.key` and :py:meth:`~reiter.cursor.Cursor.current`
    if :py:meth:`~reiter.cursor.Cursor.valid` would be :py:const:`False`.
    The underlying sequence is either empty or has been consumed completely.

    :note: This is a :py:exc:`LookupError` and not a :py:exc:`StopIteration`.
           Accessing a missing element is an error of the caller,
           not the regular end of iteration.
    """
    pass
