from typing import Tuple

import torch

from ..constants import MULTICLASS_TYPE_KEY
from .base_model import BaseModel, validate_dim


class MultiClassClassifier(BaseModel):
    """
    Multi-class classifier: one linear logit per class followed by softmax.

    Parameter layout is class-major: for each class c, its weight row
    weights_c[input_size] followed immediately by bias_c.
    Total: num_classes * (input_size + 1)
    """

    type_key = MULTICLASS_TYPE_KEY
    arity = 2

    def __init__(self, input_size: int, num_classes: int) -> None:
        super().__init__(input_size)
        self.num_classes = validate_dim("num_classes", num_classes)
        # Shape: (num_classes, input_size)
        self.weights = self._zeros(self.num_classes, self._input_size)
        # Shape: (num_classes,)
        self.bias = self._zeros(self.num_classes)

    @property
    def num_parameters(self) -> int:
        return self.num_classes * (self._input_size + 1)

    @property
    def dims(self) -> Tuple[int, ...]:
        return (self._input_size, self.num_classes)

    def output_size(self) -> int:
        return self.num_classes

    def get_model_type(self) -> str:
        return f"Multi-Class Classifier ({self.num_classes} classes)"

    def _compute(self, x: torch.Tensor) -> torch.Tensor:
        logits = torch.mv(self.weights, x) + self.bias
        if logits.numel() == 0:
            return logits

        # Subtract the max logit before exponentiating; exp() overflows otherwise
        exp_logits = torch.exp(logits - logits.max())
        return exp_logits / exp_logits.sum()

    def _load_flat(self, flat: torch.Tensor) -> None:
        rows = flat.reshape(self.num_classes, self._input_size + 1)
        self.weights.copy_(rows[:, : self._input_size])
        self.bias.copy_(rows[:, self._input_size])

    def _flatten(self) -> torch.Tensor:
        return torch.cat([self.weights, self.bias.unsqueeze(1)], dim=1).reshape(-1)
