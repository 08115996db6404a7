"""
Model factory for building SwapNet models from configuration.

Provides a single entry point for creating models from:
- ModelConfig objects
- YAML configuration files

The registry is passed in explicitly; when omitted, a fresh default
registry is built for the call.
"""

import os
from pathlib import Path
from typing import Optional, Union

from ..registry import Registry, create_default_registry
from .base_model import BaseModel
from .model_config import ModelConfig


def build_model(
    source: Union[str, Path, ModelConfig],
    *,
    registry: Optional[Registry] = None,
    load_parameters: bool = True,
) -> BaseModel:
    """
    Build a SwapNet model from a config object or YAML file.

    Args:
        source: One of:
            - ModelConfig object
            - Path to YAML config file (e.g., "configs/classifier.yaml")
        registry: Registry to resolve model_type against (default: create_default_registry())
        load_parameters: Whether to load config.parameters when present (default: True)

    Returns:
        Initialized model (BaseModel subclass)

    Examples:
        >>> model = build_model("configs/classifier.yaml")

        >>> config = ModelConfig(model_type="linear", dims=[3], parameters=[0.5, 0.3, 0.2, 0.1])
        >>> model = build_model(config, registry=registry)

    Raises:
        ValueError: If source is invalid
        FileNotFoundError: If the config file does not exist
        UnknownModelTypeError: If model_type is not registered for len(dims)
        DimensionMismatchError: If parameters has the wrong length
    """
    if isinstance(source, ModelConfig):
        config = source
    elif isinstance(source, (str, Path)) and str(source).endswith((".yaml", ".yml")):
        if not os.path.isfile(source):
            raise FileNotFoundError(f"Configuration file not found: {source}")
        config = ModelConfig.from_yaml(source)
    else:
        raise ValueError(
            f"Invalid source: {source}. "
            f"Expected a YAML config path or a ModelConfig object."
        )

    if registry is None:
        registry = create_default_registry()

    model = registry.create(config.model_type, *config.dims)

    if load_parameters and config.parameters is not None:
        model.set_parameters(config.parameters)

    return model


def save_model(
    model: BaseModel,
    path: Union[str, Path],
    description: Optional[str] = None,
    model_type: Optional[str] = None,
) -> Path:
    """
    Save a model's type, dimensions and parameters as a YAML config.

    Args:
        model: Model to save
        path: Destination YAML file
        description: Optional note stored with the config
        model_type: Registry name to store (default: the name the model was created under)

    Returns:
        Path to the saved configuration file
    """
    path = Path(path)
    ModelConfig.from_model(model, description=description, model_type=model_type).to_yaml(path)
    return path
