import torch

from ..constants import LINEAR_TYPE_KEY
from .base_model import BaseModel


class LinearRegression(BaseModel):
    """
    Linear regression: output = w1*x1 + w2*x2 + ... + bias.

    Parameter layout: weights[input_size] ++ bias
    """

    type_key = LINEAR_TYPE_KEY
    arity = 1

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size)
        # Shape: (input_size,)
        self.weights = self._zeros(self._input_size)
        # Shape: (1,)
        self.bias = self._zeros(1)

    @property
    def num_parameters(self) -> int:
        return self._input_size + 1

    def output_size(self) -> int:
        return 1

    def get_model_type(self) -> str:
        return "Linear Regression"

    def _linear(self, x: torch.Tensor) -> torch.Tensor:
        return torch.dot(self.weights, x).reshape(1) + self.bias

    def _compute(self, x: torch.Tensor) -> torch.Tensor:
        return self._linear(x)

    def _load_flat(self, flat: torch.Tensor) -> None:
        self.weights.copy_(flat[: self._input_size])
        self.bias.copy_(flat[self._input_size :])

    def _flatten(self) -> torch.Tensor:
        return torch.cat([self.weights, self.bias])
