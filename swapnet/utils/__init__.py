"""SwapNet utility functions."""

from .case_loader import ForwardCase, load_cases, parse_case_line
from .warnings import (
    ConfigurationWarning,
    DataFormatWarning,
    NonFiniteValueWarning,
    SwapNetWarning,
    configure_warnings,
    disable_all_warnings,
    enable_all_warnings,
    enable_strict_mode,
    suppress_warnings,
    warn_non_finite,
)
