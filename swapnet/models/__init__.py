"""
SwapNet Models Module

Provides the four built-in model types behind a shared interface.

Main Components:
- BaseModel: Capability set shared by all models
- LinearRegression, LogisticRegression, MultiClassClassifier, TwoLayerMLP
- ModelConfig: Configuration dataclass with YAML I/O
- build_model / save_model: Config-driven construction and persistence

Usage Examples:
    >>> from swapnet import create_default_registry
    >>> registry = create_default_registry()
    >>> model = registry.create("mlp", 2, 3, 2)
    >>> model.set_parameters([0.1] * model.num_parameters)
    >>> model.forward([1.5, -0.8])
"""

# Core components
from .base_model import BaseModel
from .model_config import ModelConfig

# Model implementations
from .linear_regression import LinearRegression
from .logistic_regression import LogisticRegression
from .multi_class_classifier import MultiClassClassifier
from .two_layer_mlp import TwoLayerMLP

# Factory functions
from .factory import build_model, save_model

__all__ = [
    # Core
    "BaseModel",
    "ModelConfig",

    # Models
    "LinearRegression",
    "LogisticRegression",
    "MultiClassClassifier",
    "TwoLayerMLP",

    # Factory
    "build_model",
    "save_model",
]
