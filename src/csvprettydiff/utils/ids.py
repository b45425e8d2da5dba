#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Identifier helpers for comparison sessions."""

from __future__ import annotations

import secrets
import string

from csvprettydiff.constants import DIFF_ID_LENGTH

_ID_ALPHABET = string.ascii_letters + string.digits


def generate_id(length: int = DIFF_ID_LENGTH) -> str:
    """Generate a random alphanumeric id.

    Parameters
    ----------
    length : int, default 8
        Number of characters

    Returns
    -------
    str
        Random id such as ``"aZ3kq9Lm"``

    """
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
