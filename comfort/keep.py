"""
KEEP wrapper to force a replacement value from a step.
"""

from typing import Any


class KEEP:
    """
    Wrapper to force a replacement that would otherwise read as "no change".

    A step returning None leaves the threaded value untouched. Wrap the
    return value with KEEP() to replace it regardless.

    Examples:
        KEEP(None)    # Threaded value becomes None
        KEEP("")      # Threaded value becomes ""
    """

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"KEEP({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KEEP):
            return self.value == other.value
        return False
