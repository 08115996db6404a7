import torch

from ..constants import LOGISTIC_TYPE_KEY
from .linear_regression import LinearRegression


class LogisticRegression(LinearRegression):
    """
    Logistic regression: sigmoid of the linear combination.

    Shares the weights ++ bias layout with LinearRegression. The sigmoid is
    applied unclamped, so outputs stay in (0, 1) for finite inputs.
    """

    type_key = LOGISTIC_TYPE_KEY
    arity = 1

    def get_model_type(self) -> str:
        return "Logistic Regression"

    def _compute(self, x: torch.Tensor) -> torch.Tensor:
        return torch.sigmoid(self._linear(x))
