from typing import List, Optional


def first_value(values: Optional[List[str]]) -> Optional[str]:
    """
    First occurrence of a repeated query parameter.
    `?code_insee=75056&code_insee=` means 75056, not the empty string.
    """
    if not values:
        return None
    return values[0]
