"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
    }


def parse_seed(value) -> Optional[int]:
    """
    Parses an optional puzzle seed from request data.

    Raises:
        ValueError: If the value is present but not a non-negative integer
    """
    if value is None or value == '':
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError("Seed must be a non-negative integer")
    try:
        seed = int(value)
    except (TypeError, ValueError):
        raise ValueError("Seed must be a non-negative integer")
    if seed < 0:
        raise ValueError("Seed must be a non-negative integer")
    return seed
