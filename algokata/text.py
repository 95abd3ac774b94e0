"""String exercises: parsing, comparison, compression and search."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

_BRACKETS = {"(": ")", "[": "]", "{": "}"}

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings.

    The result is at least as wide as the wider operand.
    """
    if any(char not in "01" for char in a + b):
        raise ValueError("binary strings may only hold 0 and 1")
    width = max(len(a), len(b))
    digits = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        carry, digit = divmod(int(x) + int(y) + carry, 2)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle or haystack gives -1.
    """
    if not haystack or not needle or len(needle) > len(haystack):
        return -1
    return haystack.find(needle)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket is closed by its match in the right order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for char in s:
        if char in _BRACKETS:
            stack.append(char)
        elif not stack or _BRACKETS[stack.pop()] != char:
            return False
    return not stack


def is_one_away(s1: str, s2: str) -> bool:
    """Tell whether the strings differ by at most one edit, ignoring case."""
    s1, s2 = s1.lower(), s2.lower()
    i = j = edits = 0
    while i < len(s1) or j < len(s2):
        if i == len(s1):
            edits += 1
            j += 1
        elif j == len(s2):
            edits += 1
            i += 1
        elif s1[i] == s2[j]:
            i += 1
            j += 1
        else:
            edits += 1
            if len(s2) > len(s1):
                j += 1
            elif len(s1) > len(s2):
                i += 1
            else:
                i += 1
                j += 1
        if edits > 1:
            return False
    return True


def is_unique(s: str) -> bool:
    """Tell whether all characters differ, without an extra container."""
    return all(char not in s[index + 1 :] for index, char in enumerate(s))


def is_unique_set(s: str) -> bool:
    """Tell whether all characters differ, remembering the ones seen."""
    seen: set[str] = set()
    for char in s:
        if char in seen:
            return False
        seen.add(char)
    return True


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").split(" ")[-1])


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run without a repeated character."""
    best = 0
    start = 0
    last_seen: dict[str, int] = {}
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by all strings."""
    strs = list(strs)
    prefix = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def is_palindrome_permutation(s: str) -> bool:
    """Tell whether some ordering of ``s`` is a palindrome.

    Case and spaces are ignored; other characters count.
    """
    counts = Counter(s.lower().replace(" ", ""))
    return sum(count % 2 for count in counts.values()) <= 1


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as error:
        raise ValueError(f"not a Roman numeral: {s!r}") from error
    return sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )


def compress(s: str) -> str:
    """Run-length encode ``s`` as character and count pairs.

    The original is returned unless some run is at least three long.
    """
    runs = [(char, len(list(group))) for char, group in groupby(s)]
    if not runs or max(length for _, length in runs) < 3:
        return s
    return "".join(f"{char}{length}" for char, length in runs)


def is_rotation(s1: str, s2: str) -> bool:
    """Tell whether some rotation of ``s2`` occurs inside ``s1``."""
    if not s2:
        return True
    return any(s2[k:] + s2[:k] in s1 for k in range(len(s2)))


def urlify(s: str) -> str:
    """Replace every space with ``%20``."""
    return s.replace(" ", "%20")


def reverse_string(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def is_palindrome_string(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, exactly as given."""
    return s == s[::-1]