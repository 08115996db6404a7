"""
SwapNet: swappable feed-forward inference models

A small set of forward-only numeric models (linear regression, logistic
regression, softmax classifier, two-layer perceptron) behind one interface,
constructed by name and dimension count through a registry.

Warning Control:
---------------
SwapNet does not print from its core. Non-fatal diagnostics are issued as
warnings:
- NonFiniteValueWarning: NaN or infinity loaded as parameters
- DataFormatWarning: malformed lines skipped by the case loader
- ConfigurationWarning: unknown fields in a model config

To control warnings, use Python's warnings module:

# Suppress all SwapNet warnings:
import warnings
from swapnet.utils import SwapNetWarning
warnings.filterwarnings('ignore', category=SwapNetWarning)

# Treat warnings as errors (strict mode):
from swapnet.utils import enable_strict_mode
enable_strict_mode()
"""

from .exceptions import DimensionMismatchError, SwapNetError, UnknownModelTypeError

# Import model zoo
from .models import (
    BaseModel,
    LinearRegression,
    LogisticRegression,
    ModelConfig,
    MultiClassClassifier,
    TwoLayerMLP,
    build_model,
    save_model,
)
from .registry import Registry, create_default_registry
from .utils import ForwardCase, load_cases

__version__ = "0.1.0"

__all__ = [
    "Registry",
    "create_default_registry",
    "BaseModel",
    "LinearRegression",
    "LogisticRegression",
    "MultiClassClassifier",
    "TwoLayerMLP",
    # Config and factory
    "ModelConfig",
    "build_model",
    "save_model",
    # Case files
    "ForwardCase",
    "load_cases",
    # Errors
    "SwapNetError",
    "DimensionMismatchError",
    "UnknownModelTypeError",
]
