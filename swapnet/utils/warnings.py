"""
Warning utilities for the SwapNet package.

SwapNet never prints from its core; non-fatal diagnostics go through the
standard warnings module using the categories defined here. Users can control
warning behavior with the helpers below or with warnings filters directly.

Examples:
    # Suppress all SwapNet warnings
    >>> import warnings
    >>> warnings.filterwarnings('ignore', category=SwapNetWarning)

    # Suppress only malformed case-file lines
    >>> warnings.filterwarnings('ignore', category=DataFormatWarning)

    # Treat warnings as errors for strict checking
    >>> enable_strict_mode()
"""

import functools
import warnings
from typing import Any, Optional, Type


class SwapNetWarning(UserWarning):
    """Base warning class for SwapNet-specific warnings."""

    pass


class ConfigurationWarning(SwapNetWarning):
    """Warning for suspicious but accepted configuration."""

    pass


class NonFiniteValueWarning(SwapNetWarning, RuntimeWarning):
    """Warning for NaN or infinite values loaded into a model."""

    pass


class DataFormatWarning(SwapNetWarning):
    """Warning for lines of a case file that could not be parsed."""

    pass


def warn_non_finite(what: str, count: int, stacklevel: int = 2) -> None:
    """
    Issue a warning when a vector contains NaN or infinite values.

    Args:
        what: Name of the vector (e.g. "parameters")
        count: Number of non-finite entries
        stacklevel: Stack level for warning source (default 2 for direct calls,
                   3 for nested function calls)
    """
    warnings.warn(
        f"{what} contain {count} non-finite value(s); forward results will not be finite",
        category=NonFiniteValueWarning,
        stacklevel=stacklevel + 1,
    )


def configure_warnings(
    action: str = "default",
    category: Optional[Type[Warning]] = None,
    module_pattern: Optional[str] = None,
) -> None:
    """
    Configure warning filters for SwapNet.

    Warnings are attributed to the caller's frame, so filtering by category is
    the default; pass module_pattern to narrow by the attributed module.

    Args:
        action: Warning action - 'default', 'ignore', 'always', 'error', 'once'
        category: Specific warning category to filter (None for all SwapNet warnings)
        module_pattern: Optional regex matched against the attributed module

    Examples:
        >>> # Ignore all SwapNet warnings
        >>> configure_warnings('ignore')

        >>> # Ignore case-file warnings only
        >>> configure_warnings('ignore', category=DataFormatWarning)
    """
    if category is None:
        category = SwapNetWarning
    if module_pattern is None:
        warnings.filterwarnings(action, category=category)
    else:
        warnings.filterwarnings(action, category=category, module=module_pattern)


def suppress_warnings(func: Any) -> Any:
    """
    Decorator to suppress SwapNet warnings for a specific function.

    Example:
        >>> @suppress_warnings
        >>> def load_quietly(path):
        >>>     return load_cases(path)
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", category=SwapNetWarning)
            return func(*args, **kwargs)

    return wrapper


# Preset warning configurations
def enable_all_warnings() -> None:
    """Enable all SwapNet warnings (useful for debugging)."""
    configure_warnings("always")


def disable_all_warnings() -> None:
    """Disable all SwapNet warnings."""
    configure_warnings("ignore")


def enable_strict_mode() -> None:
    """Treat all SwapNet warnings as errors."""
    configure_warnings("error")
