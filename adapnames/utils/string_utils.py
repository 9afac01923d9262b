"""
String Masking Utilities for adapnames.

A masked component carries an escape character in front of every literal
occurrence of a control character. These helpers apply and remove that
masking and join components into a single string.
"""

from __future__ import annotations

from typing import Iterable, List

from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER


# =============================================================================
# Masking
# =============================================================================

def mask_component(
    component: str,
    delimiter: str = DEFAULT_DELIMITER,
    escape: str = ESCAPE_CHARACTER,
) -> str:
    """
    Mask the control characters of a single component.

    Every literal escape character is doubled and every literal delimiter
    is prefixed with the escape character. All other characters pass
    through unchanged.

    Args:
        component: Component text to mask
        delimiter: Delimiter character to protect
        escape: Escape character

    Returns:
        Masked component
    """
    masked: List[str] = []
    for char in component:
        if char == escape:
            masked.append(escape + escape)
        elif char == delimiter:
            masked.append(escape + delimiter)
        else:
            masked.append(char)
    return "".join(masked)


def unmask_component(component: str, escape: str = ESCAPE_CHARACTER) -> str:
    """
    Remove masking from a single component.

    An escape character followed by any character collapses to that
    character. A trailing lone escape character is kept verbatim.

    Args:
        component: Masked component text
        escape: Escape character

    Returns:
        Unmasked component
    """
    unmasked: List[str] = []
    i = 0
    while i < len(component):
        char = component[i]
        if char == escape and i + 1 < len(component):
            i += 1
            unmasked.append(component[i])
        else:
            unmasked.append(char)
        i += 1
    return "".join(unmasked)


# =============================================================================
# Joining
# =============================================================================

def join_components(components: Iterable[str], delimiter: str) -> str:
    """Join components with the given delimiter."""
    return delimiter.join(components)
