"""
Whitelist filter.

Removes known-safe tokens and phrases from a message before it is chunked,
so they can never produce a match.

Dependencies: re (stdlib)
System role: First stage of the classification pipeline
"""

import re

WHITESPACE = re.compile(r"\s")


class WhitelistFilter:
    """Drop whitelisted tokens (or multi-word phrases) from a message."""

    def __init__(self, phrases: list[str]) -> None:
        """
        Args:
            phrases: Whitelisted phrases, matched case-insensitively
        """
        self._phrases = {" ".join(phrase.lower().split()) for phrase in phrases if phrase.strip()}
        self._max_words = max((len(p.split(" ")) for p in self._phrases), default=0)

    def apply(self, message: str) -> str:
        """
        Remove whitelisted tokens and rejoin the rest with single spaces.

        A phrase matches a run of consecutive tokens whose lowercase forms,
        joined by one space, equal it. Longer phrases are tried first.

        Args:
            message: Raw message text

        Returns:
            str: Filtered message ("" when every token was removed)
        """
        tokens = WHITESPACE.split(message)
        if not self._phrases:
            return " ".join(tokens)

        kept: list[str] = []
        i = 0
        while i < len(tokens):
            matched = self._match_length(tokens, i)
            if matched:
                i += matched
                continue
            kept.append(tokens[i])
            i += 1
        return " ".join(kept)

    def _match_length(self, tokens: list[str], start: int) -> int:
        """Number of tokens covered by the longest phrase starting at start, or 0."""
        longest = min(self._max_words, len(tokens) - start)
        for size in range(longest, 0, -1):
            candidate = " ".join(token.lower() for token in tokens[start:start + size])
            if candidate in self._phrases:
                return size
        return 0
