"""Two-token wildcard matching (``*`` and ``?``).

The matcher backtracks: a ``*`` first tries to consume nothing, then one more
character at a time, and succeeds on the first split that lets the rest of
the pattern match.  There is no escaping and no character classes; every
other pattern character matches itself exactly.  Worst-case time is
exponential in the number of ``*`` tokens, which is fine for file names.
"""


def match(pattern: str, text: str) -> bool:
    """Return True if *text* matches *pattern* in full."""
    return _match_at(pattern, 0, text, 0)


def _match_at(pattern: str, pi: int, text: str, ti: int) -> bool:
    plen = len(pattern)
    tlen = len(text)
    while pi < plen and ti < tlen:
        c = pattern[pi]
        if c == "*":
            pi += 1
            if pi == plen:
                return True
            while ti < tlen:
                if _match_at(pattern, pi, text, ti):
                    return True
                ti += 1
            return False
        if c == "?" or c == text[ti]:
            pi += 1
            ti += 1
        else:
            return False

    # Text exhausted: only trailing stars may remain
    while pi < plen and pattern[pi] == "*":
        pi += 1
    return pi == plen and ti == tlen
