"""
Model registry for SwapNet.

Maps a (type name, arity) pair to a model class, where arity is the number of
dimension integers a construction request supplies. The pair is one compound
key: "mlp" with two dimensions is an unknown type even though "mlp" with three
is registered.

There is no module-level registry instance. Callers build one, usually with
create_default_registry(), and pass it where it is needed.
"""

import warnings
from typing import Callable, Dict, List, Optional, Tuple, Type

from .exceptions import UnknownModelTypeError
from .models.base_model import BaseModel, validate_dim


class Registry:
    """
    Registry of SwapNet model classes keyed by (name, arity).
    Mutable until freeze() is called, read-only afterwards.
    """

    def __init__(self) -> None:
        self._models: Dict[Tuple[str, int], Type["BaseModel"]] = {}
        self._frozen = False

    # ==================== Model Registration ====================

    def register_model(self, name: Optional[str] = None, arity: Optional[int] = None) -> Callable:
        """
        Decorator to register a model class.

        Args:
            name: Name to register the model under. If None, uses cls.type_key.
            arity: Number of construction dimensions. If None, uses cls.arity.

        Example:
            @registry.register_model("linear", arity=1)
            class LinearRegression(BaseModel):
                pass

        Raises:
            RuntimeError: If the registry has been frozen
            TypeError: If arity is not an integer
            ValueError: If arity is not positive
        """

        def decorator(cls: Type["BaseModel"]) -> Type["BaseModel"]:
            if self._frozen:
                raise RuntimeError(
                    f"Cannot register '{name or cls.__name__}': the registry is frozen. "
                    f"Register all model types before calling freeze()."
                )

            model_name = name if name is not None else getattr(cls, "type_key", "") or cls.__name__
            model_arity = validate_dim("arity", arity if arity is not None else getattr(cls, "arity", 0))
            if model_arity == 0:
                raise ValueError(
                    f"arity must be a positive integer, but got {model_arity} for '{model_name}'"
                )

            key = (model_name, model_arity)
            if key in self._models:
                warnings.warn(
                    f"Model '{model_name}' with arity {model_arity} is already registered and will be overwritten. "
                    f"Consider using a unique name or checking existing registrations with registry.list_registered().",
                    UserWarning,
                    stacklevel=2,
                )
            self._models[key] = cls
            return cls

        return decorator

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ==================== Lookup ====================

    def get_model(self, name: str, arity: int) -> Type["BaseModel"]:
        """
        Get a registered model class by name and arity.

        Args:
            name: Name of the model type (e.g. "mlp")
            arity: Number of construction dimensions

        Returns:
            Model class

        Raises:
            UnknownModelTypeError: If (name, arity) is not registered
        """
        key = (name, arity)
        if key in self._models:
            return self._models[key]

        known_arities = sorted(a for n, a in self._models if n == name)
        if known_arities:
            message = (
                f"Model type '{name}' does not take {arity} dimension(s); "
                f"it expects {' or '.join(str(a) for a in known_arities)}."
            )
        else:
            message = (
                f"Model type '{name}' not found. "
                f"Available types: {self.list_registered()}"
            )
        raise UnknownModelTypeError(name, arity, message)

    def is_registered(self, name: str) -> bool:
        """True if name is registered at any arity."""
        return any(n == name for n, _ in self._models)

    def list_registered(self) -> List[str]:
        """List registered model names in registration order."""
        names: List[str] = []
        for n, _ in self._models:
            if n not in names:
                names.append(n)
        return names

    def list_all(self) -> Dict[str, List[int]]:
        """Mapping of each registered name to the arities it accepts."""
        return {n: sorted(a for m, a in self._models if m == n) for n in self.list_registered()}

    # ==================== Builder Methods ====================

    def create(self, name: str, *dims: int) -> "BaseModel":
        """
        Build a model instance from its registered name and dimensions.

        Args:
            name: Name of the model type
            *dims: Construction dimensions; their count selects the arity

        Returns:
            Instance of the model with zero-initialized parameters. Its
            registered_name is set to name so that save_model() writes the
            key this registry resolves.

        Examples:
            >>> registry.create("linear", 3)
            >>> registry.create("multiclass", 4, 3)    # input, num_classes
            >>> registry.create("mlp", 2, 3, 2)        # input, hidden, output

        Raises:
            UnknownModelTypeError: If name is not registered for len(dims) dimensions
        """
        model_cls = self.get_model(name, len(dims))
        model = model_cls(*dims)
        model.registered_name = name
        return model

    def __contains__(self, name: str) -> bool:
        return self.is_registered(name)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"Registry({self.list_all()}, {state})"


def create_default_registry() -> Registry:
    """
    Build a frozen registry holding the four built-in model types.

    Returns:
        Registry with "linear", "logistic", "multiclass" and "mlp", in that order
    """
    from .models import LinearRegression, LogisticRegression, MultiClassClassifier, TwoLayerMLP

    registry = Registry()
    for model_cls in (LinearRegression, LogisticRegression, MultiClassClassifier, TwoLayerMLP):
        registry.register_model()(model_cls)
    registry.freeze()
    return registry
