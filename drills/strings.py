"""String and character-sequence puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_MORSE = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---", "-.-",
    ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-", "..-", "...-",
    ".--", "-..-", "-.--", "--..",
)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += value if value >= following else -value
    return total


def remove_palindrome_sub(s: str) -> int:
    """Return how many palindromic subsequence removals empty s: 0, 1 or 2."""
    if not s:
        return 0
    return 1 if s == s[::-1] else 2


def repeated_character(s: str) -> str | None:
    """Return the first character whose second occurrence comes earliest, or None."""
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            return ch
        seen.add(ch)
    return None


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if ransom_note can be spelled with the letters of magazine."""
    return not Counter(ransom_note) - Counter(magazine)


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def reverse_str(s: str, k: int) -> str:
    """Reverse the first k characters of every 2k-character block."""
    if k < 1:
        raise ValueError("k must be positive")
    return "".join(
        s[start:start + k][::-1] + s[start + k:start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def reverse_words(s: str) -> str:
    """Reverse each space-separated word while keeping the spacing and word order."""
    return " ".join(word[::-1] for word in s.split(" "))


def unique_morse_representations(words: Iterable[str]) -> int:
    """Count the distinct Morse transcriptions of lowercase words."""
    codes = set()
    for word in words:
        if not all("a" <= ch <= "z" for ch in word):
            raise ValueError(f"word {word!r} must contain only lowercase letters a-z")
        codes.add("".join(_MORSE[ord(ch) - ord("a")] for ch in word))
    return len(codes)


def valid_utf8(data: Iterable[int]) -> bool:
    """Return True if the integers, read as bytes, form valid UTF-8 framing."""
    remaining = 0
    for byte in data:
        if remaining == 0:
            if byte >> 7 == 0:
                continue
            if byte >> 5 == 0b110:
                remaining = 1
            elif byte >> 4 == 0b1110:
                remaining = 2
            elif byte >> 3 == 0b11110:
                remaining = 3
            else:
                return False
        elif byte >> 6 == 0b10:
            remaining -= 1
        else:
            return False
    return remaining == 0