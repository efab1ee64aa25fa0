"""String comparison helpers."""


def _terminated(text):
    """Return ``text`` up to, but not including, its first NUL character."""
    cut = text.find("\0")
    return text if cut < 0 else text[:cut]


def str_cmp(str1, str2):
    """Compare two strings character by character.

    Returns 0 when they are equal. Otherwise returns the code point of the
    first differing character of ``str2`` minus that of ``str1``, where the
    end of a string counts as 0. A NUL character ends a string.
    """
    a = _terminated(str1)
    b = _terminated(str2)
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(cb) - ord(ca)
    if len(a) == len(b):
        return 0
    if len(a) < len(b):
        return ord(b[len(a)])
    return -ord(a[len(b)])


def str_eq(str1, str2):
    """Return True if the two strings compare equal with :func:`str_cmp`."""
    return str_cmp(str1, str2) == 0