"""
Test utilities for the SwapNet test suite.
Provides tolerance constants, reference implementations and assertion helpers.
"""

import math
import warnings
from typing import List, Sequence, Tuple

import torch

# ==================== Tolerance Constants ====================

# Forward pass tolerances against hand-computed values
FP32_ATOL = 1e-4
FP32_RTOL = 1e-4

# Tolerance for values rounded in case files
CASE_ATOL = 1e-3

# Softmax outputs must sum to one within this relative tolerance
SOFTMAX_SUM_RTOL = 1e-5


# ==================== Model Specs ====================

# (name, dims, num_parameters, output_size) for every built-in model type
MODEL_SPECS: List[Tuple[str, Tuple[int, ...], int, int]] = [
    ("linear", (3,), 4, 1),
    ("logistic", (2,), 3, 1),
    ("multiclass", (2, 3), 9, 3),
    ("mlp", (2, 3, 2), 17, 2),
]

MODEL_SPEC_IDS = [spec[0] for spec in MODEL_SPECS]


def ramp(count: int, start: float = -0.5, step: float = 0.1) -> List[float]:
    """Deterministic, non-constant test vector."""
    return [start + step * i for i in range(count)]


# ==================== Reference Implementations ====================


def reference_linear(x: Sequence[float], params: Sequence[float]) -> float:
    n = len(x)
    return sum(params[i] * x[i] for i in range(n)) + params[n]


def reference_sigmoid(z: float) -> float:
    return 1.0 / (1.0 + math.exp(-z))


def reference_softmax(logits: Sequence[float]) -> List[float]:
    m = max(logits)
    exps = [math.exp(v - m) for v in logits]
    total = sum(exps)
    return [e / total for e in exps]


def reference_multiclass(x: Sequence[float], params: Sequence[float], num_classes: int) -> List[float]:
    n = len(x)
    logits = []
    for c in range(num_classes):
        row = params[c * (n + 1) : (c + 1) * (n + 1)]
        logits.append(reference_linear(x, row))
    return reference_softmax(logits)


def reference_mlp(
    x: Sequence[float], params: Sequence[float], hidden: int, output: int
) -> Tuple[List[float], List[float]]:
    """Returns (hidden activations, outputs) using the documented flat layout."""
    n = len(x)
    w1 = params[: n * hidden]
    b1 = params[n * hidden : n * hidden + hidden]
    offset = n * hidden + hidden
    w2 = params[offset : offset + hidden * output]
    b2 = params[offset + hidden * output :]

    h = [max(0.0, sum(w1[i * hidden + j] * x[i] for i in range(n)) + b1[j]) for j in range(hidden)]
    out = [sum(w2[j * output + o] * h[j] for j in range(hidden)) + b2[o] for o in range(output)]
    return h, out


# ==================== Assertion Helpers ====================


def assert_tensors_close(
    actual: torch.Tensor,
    expected,
    atol: float = FP32_ATOL,
    rtol: float = FP32_RTOL,
    msg: str = "",
):
    """
    Assert a tensor is close to expected values within tolerance.

    Args:
        actual: Actual tensor
        expected: Expected tensor or sequence of floats
        atol: Absolute tolerance
        rtol: Relative tolerance
        msg: Additional message
    """
    expected = torch.as_tensor(expected, dtype=actual.dtype)
    assert actual.shape == expected.shape, f"Shape mismatch: {actual.shape} != {expected.shape}. {msg}"
    if not torch.allclose(actual, expected, atol=atol, rtol=rtol):
        max_diff = (actual - expected).abs().max().item()
        raise AssertionError(
            f"Tensors not close: max_diff={max_diff}, atol={atol}, rtol={rtol}. "
            f"actual={actual.tolist()}, expected={expected.tolist()}. {msg}"
        )


def assert_probability_vector(probs: torch.Tensor, msg: str = ""):
    """Assert entries are in [0, 1] and sum to one."""
    assert probs.min().item() >= 0.0, f"Negative probability in {probs.tolist()}. {msg}"
    assert probs.max().item() <= 1.0, f"Probability above 1 in {probs.tolist()}. {msg}"
    total = probs.sum().item()
    assert math.isclose(total, 1.0, rel_tol=SOFTMAX_SUM_RTOL), f"Sum is {total}, expected 1.0. {msg}"


# ==================== Warnings ====================


class IgnoreWarnings:
    """Context manager to temporarily ignore warnings."""

    def __init__(self, category=UserWarning):
        self.category = category

    def __enter__(self):
        self.original_filters = warnings.filters[:]
        warnings.filterwarnings("ignore", category=self.category)
        return self

    def __exit__(self, *args):
        warnings.filters[:] = self.original_filters
