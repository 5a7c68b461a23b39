"""
Message chunkers.

Two complementary segmentations of a filtered message:
- WordChunker: one chunk per whitespace-delimited token
- SemanticChunker: overlapping multi-word windows built with LangChain's
  RecursiveCharacterTextSplitter

Dependencies: langchain_text_splitters
System role: Segmentation stage of the classification pipeline
"""

import re

from langchain_text_splitters import RecursiveCharacterTextSplitter

WHITESPACE = re.compile(r"\s")


class WordChunker:
    """Split text on every whitespace character."""

    def split(self, text: str) -> list[str]:
        """
        Split text into tokens.

        Consecutive whitespace produces empty strings, e.g.
        "a  b" -> ["a", "", "b"].

        Args:
            text: Filtered message

        Returns:
            list[str]: Tokens in original order
        """
        return WHITESPACE.split(text)


class SemanticChunker:
    """Split text into overlapping word windows using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 10,
        chunk_overlap: int = 6,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Target chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=[" "],
            keep_separator=False,
            length_function=len,
        )

    def split(self, text: str) -> list[str]:
        """
        Split text into overlapping windows.

        Single-word messages yield no windows; the word chunker already
        covers them.

        Args:
            text: Filtered message

        Returns:
            list[str]: Chunk texts in order
        """
        if len(WHITESPACE.split(text)) == 1:
            return []

        return self._splitter.split_text(text)
