"""
Token estimation.

Single approximation of text volume used for every sizing decision:
one token per four characters, rounded up.

Dependencies: None
System role: Shared token arithmetic for packer, grouper, ingestion and status
"""

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """
    Estimate the token count of a text span.

    Args:
        text: Any string

    Returns:
        int: ceil(len(text) / 4)
    """
    return (len(text) + CHARS_PER_TOKEN - 1) // CHARS_PER_TOKEN
