"""String puzzles: happy strings and happy prefixes."""

from __future__ import annotations

_LETTERS = "abc"


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Build a long string of at most ``a``/``b``/``c`` letters with no triple repeats."""
    counts = dict(zip(_LETTERS, (a, b, c)))
    if any(count < 0 for count in counts.values()):
        raise ValueError("letter counts must not be negative")

    chunks: list[str] = []

    def take(letter: str, limit: int) -> None:
        used = min(limit, counts[letter])
        counts[letter] -= used
        chunks.append(letter * used)

    opening = max(_LETTERS, key=counts.__getitem__)
    if counts[opening] == 0:
        return ""
    take(opening, 2)

    while any(counts.values()):
        for letter in _LETTERS:
            others = [other for other in _LETTERS if other != letter]
            while all(counts[letter] >= counts[other] for other in others):
                if chunks[-1][-1] == letter:
                    fallback = next((other for other in others if counts[other]), None)
                    if fallback is None:
                        return "".join(chunks)
                    take(fallback, 1)
                elif counts[letter] == 0:
                    return "".join(chunks)
                else:
                    take(letter, 2)
    return "".join(chunks)


def longest_prefix(s: str) -> str:
    """Return the longest proper prefix of ``s`` that is also a suffix."""
    if not s:
        return ""
    borders = [0] * len(s)
    matched = 0
    position = 1
    while position < len(s):
        if s[position] == s[matched]:
            matched += 1
            borders[position] = matched
            position += 1
        elif matched:
            matched = borders[matched - 1]
        else:
            position += 1
    return s[:borders[-1]]