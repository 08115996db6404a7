from typing import Tuple

import torch

from ..constants import MLP_TYPE_KEY
from .base_model import BaseModel, validate_dim


class TwoLayerMLP(BaseModel):
    """
    Two-layer perceptron with a ReLU hidden layer and a linear output layer.

        hidden = relu(x @ W1 + b1)
        output = hidden @ W2 + b2

    Parameter layout: W1 ++ b1 ++ W2 ++ b2, where W1 is flattened by input
    row (W1[i * hidden_size + j]) and W2 by hidden row (W2[j * output_size + o]).
    Total: input*hidden + hidden + hidden*output + output
    """

    type_key = MLP_TYPE_KEY
    arity = 3

    def __init__(self, input_size: int, hidden_size: int, output_size: int) -> None:
        super().__init__(input_size)
        self.hidden_size = validate_dim("hidden_size", hidden_size)
        self._output_size = validate_dim("output_size", output_size)

        # Shape: (input_size, hidden_size), matches the flat row-major layout
        self.w1 = self._zeros(self._input_size, self.hidden_size)
        self.b1 = self._zeros(self.hidden_size)
        # Shape: (hidden_size, output_size)
        self.w2 = self._zeros(self.hidden_size, self._output_size)
        self.b2 = self._zeros(self._output_size)

    @property
    def num_parameters(self) -> int:
        return sum(p.numel() for p in self._ordered_parameters())

    @property
    def dims(self) -> Tuple[int, ...]:
        return (self._input_size, self.hidden_size, self._output_size)

    def output_size(self) -> int:
        return self._output_size

    def get_model_type(self) -> str:
        return "Two-Layer MLP"

    def hidden_activations(self, x) -> torch.Tensor:
        """
        Hidden-layer values (after ReLU) for a single input vector.

        Raises:
            DimensionMismatchError: If x is not 1D or has the wrong length
        """
        x = self._as_vector(x, "input", self._input_size)
        with torch.no_grad():
            return self._hidden(x)

    def _hidden(self, x: torch.Tensor) -> torch.Tensor:
        return torch.relu(x @ self.w1 + self.b1)

    def _compute(self, x: torch.Tensor) -> torch.Tensor:
        return self._hidden(x) @ self.w2 + self.b2

    def _ordered_parameters(self):
        return (self.w1, self.b1, self.w2, self.b2)

    def _load_flat(self, flat: torch.Tensor) -> None:
        offset = 0
        for param in self._ordered_parameters():
            count = param.numel()
            param.copy_(flat[offset : offset + count].reshape(param.shape))
            offset += count

    def _flatten(self) -> torch.Tensor:
        return torch.cat([p.reshape(-1) for p in self._ordered_parameters()])
