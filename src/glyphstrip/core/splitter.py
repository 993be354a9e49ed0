"""Text unit splitting.

Units are produced lazily, in document order. Word units never include the
delimiter and are never empty, whatever the spacing of the input.
"""

from collections.abc import Iterator

from glyphstrip.config import SplitPolicy


def iter_words(text: str, delimiter: str = " ") -> Iterator[str]:
    """Yield the maximal runs of text between delimiters.

    Args:
        text: Text to split
        delimiter: Separator between words

    Yields:
        Non-empty words, left to right

    Raises:
        ValueError: If delimiter is empty
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    start = 0
    while start < len(text):
        end = text.find(delimiter, start)
        if end == -1:
            end = len(text)
        if end > start:
            yield text[start:end]
        start = end + len(delimiter)


def iter_characters(text: str) -> Iterator[str]:
    """Yield every character of the text, delimiters included."""
    yield from text


def split_units(
    text: str,
    policy: SplitPolicy = SplitPolicy.WORD,
    delimiter: str = " ",
) -> Iterator[str]:
    """Split text into units according to the policy.

    Args:
        text: Text to split
        policy: Word or character units
        delimiter: Word separator (ignored for character units)

    Returns:
        Lazy iterator over the units
    """
    if policy == SplitPolicy.CHARACTER:
        return iter_characters(text)
    return iter_words(text, delimiter)
