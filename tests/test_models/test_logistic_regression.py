"""
Forward pass tests for LogisticRegression.
"""

import math

import pytest
from testing_utils import assert_tensors_close, reference_linear, reference_sigmoid

from swapnet import DimensionMismatchError, LinearRegression, LogisticRegression


def test_metadata(registry):
    model = registry.create("logistic", 2)

    assert isinstance(model, LogisticRegression)
    assert model.input_size() == 2
    assert model.output_size() == 1
    assert model.num_parameters == 3
    assert model.get_model_type() == "Logistic Regression"


def test_forward_known_value(registry):
    """z = 1.2*0.8 + (-0.8)*(-0.3) + 0.5 = 1.7, sigmoid(1.7) ≈ 0.8455"""
    model = registry.create("logistic", 2)
    model.set_parameters([1.2, -0.8, 0.5])

    output = model.forward([0.8, -0.3])

    assert_tensors_close(output, [1.0 / (1.0 + math.exp(-1.7))])
    assert abs(output.item() - 0.8455) < 1e-3


def test_zero_parameters_give_one_half(registry):
    model = registry.create("logistic", 4)
    assert_tensors_close(model.forward([1.0, -2.0, 3.0, -4.0]), [0.5])


@pytest.mark.parametrize("x", [[0.0, 0.0], [3.0, -1.0], [-4.0, 2.5]])
def test_output_in_open_unit_interval(registry, x):
    model = registry.create("logistic", 2)
    model.set_parameters([1.5, 0.75, -0.25])

    value = model.forward(x).item()

    assert 0.0 < value < 1.0
    assert abs(value - reference_sigmoid(reference_linear(x, [1.5, 0.75, -0.25]))) < 1e-5


def test_is_sigmoid_of_linear_model(registry):
    params = [0.3, -0.6, 0.9]
    x = [2.0, 1.0]
    linear = registry.create("linear", 2)
    logistic = registry.create("logistic", 2)
    linear.set_parameters(params)
    logistic.set_parameters(params)

    z = linear.forward(x).item()

    assert_tensors_close(logistic.forward(x), [reference_sigmoid(z)])


def test_reports_its_own_type_key():
    """Shares the parameter layout with LinearRegression but reports its own type."""
    model = LogisticRegression(2)
    assert isinstance(model, LinearRegression)
    assert model.type_key == "logistic"


def test_wrong_lengths_raise(registry):
    model = registry.create("logistic", 2)
    with pytest.raises(DimensionMismatchError):
        model.forward([1.0])
    with pytest.raises(DimensionMismatchError):
        model.set_parameters([1.0, 2.0, 3.0, 4.0])
