"""
Utility functions for the YouTube Data API MCP server.
"""

import os
from typing import Any, Dict, Mapping, Optional


def get_env(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Get a trimmed environment variable.

    Args:
        name: Name of the environment variable
        environ: Mapping to read from instead of os.environ

    Returns:
        str: The value or empty string if not set
    """
    source = os.environ if environ is None else environ
    return (source.get(name) or "").strip()


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text to a specified length with ellipsis.

    Args:
        text: Text to truncate
        max_length: Maximum length before truncation

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def safe_get(obj: Dict[str, Any], *keys, default: Any = None) -> Any:
    """Safely access nested dictionary keys.

    Args:
        obj: Dictionary to access
        keys: Sequence of keys to access
        default: Default value if keys don't exist

    Returns:
        Value at the nested key path or default value
    """
    current = obj
    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default
    return current


def redact_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Copy query parameters with credentials masked, for log lines."""
    return {k: ("***" if k == "key" else v) for k, v in params.items()}
