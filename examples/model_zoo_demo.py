#!/usr/bin/env python3
"""
Example script demonstrating the SwapNet model registry.

This script shows how to:
1. List the registered model types
2. Create each model by name and dimensions
3. Load flat parameters and run a forward pass
4. Drive models polymorphically from a list of configs
"""

from typing import List, Sequence

from swapnet import BaseModel, ModelConfig, build_model, create_default_registry


def format_vector(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{float(v):.3f}" for v in values) + "]"


def demonstrate_model(model: BaseModel, title: str, parameters: List[float], input_data: List[float]):
    """Print a model's metadata, load parameters and run one input through it."""
    print("\n" + "=" * 60)
    print(f"{title} Demo")
    print("=" * 60)

    print(f"Model type: {model.get_model_type()}")
    print(f"Input size: {model.input_size()}")
    print(f"Output size: {model.output_size()}")

    model.set_parameters(parameters)
    print(f"✓ Parameters set ({len(parameters)} values)")

    print(f"Input: {format_vector(input_data)}")
    print(f"Output: {format_vector(model.forward(input_data))}")


def main():
    print("=== SwapNet Model Zoo Demo ===")

    registry = create_default_registry()

    print("\nAvailable models:")
    for name, arities in registry.list_all().items():
        print(f"  ✓ {name} (dimensions: {' or '.join(str(a) for a in arities)})")

    demonstrate_model(
        registry.create("linear", 3),
        "Linear Regression",
        [0.5, 0.3, 0.2, 0.1],  # weights + bias
        [1.0, 2.0, -0.5],
    )

    demonstrate_model(
        registry.create("logistic", 2),
        "Logistic Regression",
        [1.2, -0.8, 0.5],
        [0.8, -0.3],
    )

    # Class-major: [w0, w1, bias] per class
    demonstrate_model(
        registry.create("multiclass", 2, 3),
        "Multi-Class Classifier",
        [1.0, 0.5, 0.2,
         -0.5, 1.2, -0.1,
         0.2, -0.8, 0.3],
        [0.6, -0.4],
    )

    # W1(6) + b1(3) + W2(6) + b2(2) = 17 values
    demonstrate_model(
        registry.create("mlp", 2, 3, 2),
        "Two-Layer MLP",
        [0.1] * 17,
        [1.5, -0.8],
    )

    print("\n" + "=" * 60)
    print("Polymorphic usage from configs")
    print("=" * 60)

    configs = [
        ModelConfig(model_type="linear", dims=[2], parameters=[0.7, 0.3, 0.0]),
        ModelConfig(model_type="logistic", dims=[2], parameters=[0.8, -0.4, 0.1]),
        ModelConfig(model_type="multiclass", dims=[2, 3], parameters=[0.5, 0.3, 0.1, -0.2, 0.6, -0.1, 0.1, -0.4, 0.2]),
        ModelConfig(model_type="mlp", dims=[2, 3, 2], parameters=[0.2] * 17),
    ]
    test_input = [1.0, 0.5]

    for config in configs:
        model = build_model(config, registry=registry)
        print(f"{model.summary()} -> {format_vector(model.forward(test_input))}")


if __name__ == "__main__":
    main()
