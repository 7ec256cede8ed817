from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def chunk(items: Optional[Sequence[T]], chunk_size: Optional[int]) -> List[List[T]]:
    """Split a sequence into ordered chunks of at most ``chunk_size`` elements.

    Args:
        items: Sequence to split (None or empty yields no chunks)
        chunk_size: Maximum chunk length; 0 or None yields one chunk with everything

    Returns:
        List of chunks whose concatenation equals ``items``
    """
    if not items:
        return []
    if not chunk_size:
        return [list(items)]
    return [list(items[i:i + chunk_size]) for i in range(0, len(items), chunk_size)]
