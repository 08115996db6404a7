"""
Model configuration dataclass for SwapNet models.

A config names a registered model type, its construction dimensions and,
optionally, the flat parameter vector to load. This is the only persisted
form of a model: parameters stay a flat list of floats.
"""

import warnings
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import yaml

from ..utils.warnings import ConfigurationWarning

if TYPE_CHECKING:
    from .base_model import BaseModel


@dataclass
class ModelConfig:
    """
    Configuration for SwapNet models.

    Fields:
        - model_type: Registered type key (linear, logistic, multiclass, mlp)
        - dims: Construction dimensions; their count is the arity
        - parameters: Optional flat parameter vector to load after construction
        - description: Free-form note, not used by the factory
    """

    model_type: str
    dims: List[int]
    parameters: Optional[List[float]] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.model_type, str) or not self.model_type:
            raise ValueError(f"model_type must be a non-empty string, but got {self.model_type!r}")
        if not isinstance(self.dims, (list, tuple)) or not self.dims:
            raise ValueError(
                f"dims must be a non-empty list of integers, but got {self.dims!r}. "
                f"Example: dims=[2, 3, 2]"
            )
        self.dims = list(self.dims)
        if self.parameters is not None:
            self.parameters = [float(p) for p in self.parameters]

    @property
    def arity(self) -> int:
        return len(self.dims)

    # ==================== Serialization ====================

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> "ModelConfig":
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ModelConfig instance

        Example YAML:
            model_type: mlp
            dims: [2, 3, 2]
            parameters: [0.1, 0.1, ...]
            description: demo perceptron
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        # Ensure required fields are present
        for field_name in ("model_type", "dims"):
            if field_name not in data:
                raise ValueError(f"Missing required field in config: {field_name}")

        return ModelConfig.from_dict(data)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to save YAML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=None, sort_keys=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ModelConfig":
        """
        Create configuration from dictionary. Unknown keys are dropped with a warning.
        """
        known = {f.name for f in fields(ModelConfig)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            warnings.warn(
                f"Ignoring unknown config field(s): {unknown}. Known fields: {sorted(known)}",
                ConfigurationWarning,
                stacklevel=2,
            )
        return ModelConfig(**{k: v for k, v in data.items() if k in known})

    @staticmethod
    def from_model(
        model: "BaseModel",
        description: Optional[str] = None,
        model_type: Optional[str] = None,
    ) -> "ModelConfig":
        """
        Capture a model's type, dimensions and current parameters.

        The stored model_type is, in order of preference: the explicit
        model_type argument, the name the model was created under by
        Registry.create(), then the class's type_key.

        Args:
            model: Any SwapNet model
            description: Optional note stored with the config
            model_type: Registry name to store instead of the model's own
        """
        if model_type is None:
            model_type = model.registered_name or model.type_key
        return ModelConfig(
            model_type=model_type,
            dims=list(model.dims),
            parameters=model.get_parameters().tolist(),
            description=description,
        )

    def __repr__(self) -> str:
        n_params = "none" if self.parameters is None else len(self.parameters)
        return f"ModelConfig(model_type={self.model_type}, dims={self.dims}, parameters={n_params})"
