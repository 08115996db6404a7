"""
Base model infrastructure for SwapNet models.

Defines the capability set every model variant exposes so that the registry's
output can be consumed uniformly: forward computation, flat parameter loading,
and metadata (input/output sizes and a human-readable type label).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import torch
import torch.nn as nn

from ..constants import DEFAULT_DTYPE
from ..exceptions import DimensionMismatchError
from ..utils.warnings import warn_non_finite

VectorLike = Union[Sequence[float], np.ndarray, torch.Tensor]


class BaseModel(nn.Module, ABC):
    """
    Abstract base class for all SwapNet models.

    Architecture:
    - Models process single 1D vectors: (input_size,) → (output_size,)
    - Dimensions are fixed at construction and never change
    - Parameters are zero-initialized and replaced wholesale by set_parameters()
    - Parameter tensors are frozen (requires_grad=False); there is no training

    Subclasses must implement:
    - _compute(): the forward computation on a validated 1D tensor
    - _load_flat(): split a validated flat vector into parameter tensors
    - _flatten(): the inverse of _load_flat()
    - num_parameters, output_size(), get_model_type()
    """

    type_key: str = ""
    arity: int = 0

    def __init__(self, input_size: int) -> None:
        """
        Args:
            input_size: Number of input features
        """
        super().__init__()
        self._input_size = validate_dim("input_size", input_size)
        # Name the model was created under; set by Registry.create()
        self.registered_name: Optional[str] = None

    # ==================== Interface ====================

    def forward(self, x: VectorLike) -> torch.Tensor:
        """
        Run the forward computation on a single input vector.

        Args:
            x: Input vector of length input_size()

        Returns:
            1D tensor of length output_size()

        Raises:
            DimensionMismatchError: If x is not 1D or has the wrong length
        """
        x = self._as_vector(x, "input", self._input_size)

        with torch.no_grad():
            return self._compute(x)

    def set_parameters(self, parameters: VectorLike) -> None:
        """
        Replace all model parameters from a flat vector.

        The vector is validated before anything is written, so a rejected
        call leaves the previous parameters in place.

        Args:
            parameters: Flat vector of exactly num_parameters values

        Raises:
            DimensionMismatchError: If parameters is not 1D or has the wrong length
        """
        flat = self._as_vector(parameters, "parameters", self.num_parameters)

        non_finite = int((~torch.isfinite(flat)).sum().item())
        if non_finite:
            warn_non_finite("parameters", non_finite, stacklevel=2)

        with torch.no_grad():
            self._load_flat(flat)

    def get_parameters(self) -> torch.Tensor:
        """Return a copy of the parameters in the layout set_parameters() accepts."""
        with torch.no_grad():
            return self._flatten().clone()

    def input_size(self) -> int:
        return self._input_size

    @abstractmethod
    def output_size(self) -> int:
        pass

    @abstractmethod
    def get_model_type(self) -> str:
        pass

    @property
    @abstractmethod
    def num_parameters(self) -> int:
        """Number of values set_parameters() expects."""
        pass

    @property
    def dims(self) -> Tuple[int, ...]:
        """Construction dimensions, in the order the registry expects them."""
        return (self._input_size,)

    # ==================== Implementation Hooks ====================

    @abstractmethod
    def _compute(self, x: torch.Tensor) -> torch.Tensor:
        pass

    @abstractmethod
    def _load_flat(self, flat: torch.Tensor) -> None:
        pass

    @abstractmethod
    def _flatten(self) -> torch.Tensor:
        pass

    # ==================== Helpers ====================

    @staticmethod
    def _zeros(*shape: int) -> nn.Parameter:
        return nn.Parameter(torch.zeros(*shape, dtype=DEFAULT_DTYPE), requires_grad=False)

    @staticmethod
    def _as_vector(values: Any, what: str, expected: int) -> torch.Tensor:
        tensor = torch.as_tensor(values, dtype=DEFAULT_DTYPE)
        if tensor.dim() != 1:
            raise DimensionMismatchError(
                what, expected, tensor.numel(), detail=f"expected a 1D vector, got shape {tuple(tensor.shape)}"
            )
        if tensor.numel() != expected:
            raise DimensionMismatchError(what, expected, tensor.numel())
        return tensor

    def summary(self) -> str:
        """One-line description built from the public metadata only."""
        return (
            f"Model: {self.get_model_type()} "
            f"(Input: {self.input_size()}, Output: {self.output_size()})"
        )

    def print_info(self) -> None:
        print(self.summary())

    def extra_repr(self) -> str:
        return ", ".join(f"{d}" for d in self.dims)


def validate_dim(name: str, value: Any) -> int:
    """Validate a construction dimension: a non-negative int (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, but got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, but got {value}")
    return int(value)
