"""Model definition registry.

Holds the ModelDefs that DDL generation and where-clause compilation look
up by name.
"""

from __future__ import annotations

from typing import Dict, List

from .core import ModelDef


_MODEL_REGISTRY: Dict[str, ModelDef] = {}


def register_model(model: ModelDef) -> None:
    """Register a model definition in the global registry."""
    if model.name in _MODEL_REGISTRY:
        raise ValueError(
            f"Model '{model.name}' is already registered. "
            "Use a different name or unregister first."
        )
    _MODEL_REGISTRY[model.name] = model


def unregister_model(name: str) -> None:
    """Remove a model definition; unknown names are ignored."""
    _MODEL_REGISTRY.pop(name, None)


def get_model(name: str) -> ModelDef:
    """Retrieve a model definition from the registry by name."""
    if name not in _MODEL_REGISTRY:
        available = list(_MODEL_REGISTRY.keys())
        raise KeyError(f"Model '{name}' not found in registry. Available: {available}")
    return _MODEL_REGISTRY[name]


def list_models() -> List[str]:
    """List all registered model names."""
    return sorted(_MODEL_REGISTRY.keys())


__all__ = [
    "register_model",
    "unregister_model",
    "get_model",
    "list_models",
]
