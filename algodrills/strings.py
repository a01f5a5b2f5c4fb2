"""String scanning, matching and combination drills."""

from collections import Counter
from itertools import product

HASH_BASE = 31
HASH_MOD = 10**9 + 9

KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

VOWELS = frozenset("aeiou")


def is_balanced_frequency(s: str) -> bool:
    """True when every character that occurs does so the same number of times."""
    return len(set(Counter(s).values())) <= 1


def count_jewels(jewels: str, stones: str) -> int:
    """Count stones whose character appears among the jewels."""
    kinds = set(jewels)
    return sum(1 for stone in stones if stone in kinds)


def vowel_names(names: list[str]) -> list[str]:
    """Distinct names starting with a lowercase vowel, in first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        if name[:1] in VOWELS:
            seen.setdefault(name, None)
    return list(seen)


def count_one_groups(bits: str) -> int:
    """Count '1' characters that start a group: at the front or after a '0'."""
    return sum(
        1 for previous, current in zip("0" + bits, bits)
        if current == "1" and previous == "0"
    )


def reverse_words(line: str) -> str:
    """The whitespace-separated words of line in reverse order."""
    return " ".join(reversed(line.split()))


def _drop(counts: Counter, char: str) -> None:
    counts[char] -= 1
    if counts[char] == 0:
        del counts[char]


def find_anagrams(log: str, pattern: str) -> list[int]:
    """Start indices of windows of log that are anagrams of pattern."""
    n, m = len(log), len(pattern)
    if m > n:
        return []
    wanted = Counter(pattern)
    window = Counter(log[:m])
    found = [0] if window == wanted else []
    for i in range(m, n):
        _drop(window, log[i - m])
        window[log[i]] += 1
        if window == wanted:
            found.append(i - m + 1)
    return found


def _value(char: str) -> int:
    return ord(char) - ord("a") + 1


def _hash(s: str) -> tuple[int, int]:
    """Polynomial hash of s and the weight of its leading character."""
    h = 0
    weight = 1
    for i in range(len(s) - 1, -1, -1):
        h = (h + _value(s[i]) * weight) % HASH_MOD
        if i:
            weight = weight * HASH_BASE % HASH_MOD
    return h, weight


def rabin_karp(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of pattern in text, found by rolling hash."""
    n, m = len(text), len(pattern)
    if m > n:
        return []
    target, _ = _hash(pattern)
    h, weight = _hash(text[:m])
    found = [0] if h == target and text[:m] == pattern else []
    for i in range(m, n):
        h = (h - _value(text[i - m]) * weight % HASH_MOD + HASH_MOD) * HASH_BASE % HASH_MOD
        h = (h + _value(text[i])) % HASH_MOD
        start = i - m + 1
        if h == target and text[start:start + m] == pattern:
            found.append(start)
    return found


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad can spell from digits."""
    if not digits:
        return []
    try:
        letters = [KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]