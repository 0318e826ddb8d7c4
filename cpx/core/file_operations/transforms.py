"""Resolve content transforms from import paths."""

import importlib
from collections.abc import Iterable

from cpx.core.errors import ConfigError
from cpx.models import Transform


def load_transform(spec: str) -> Transform:
    """Import a transform given as ``"package.module:function"``.

    Args:
        spec: Import path of a ``bytes -> bytes`` callable

    Returns:
        The callable

    Raises:
        ConfigError: If the module or attribute cannot be resolved, or is
            not callable
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(
            f"Invalid transform '{spec}', expected 'module:function'",
            {"transform": spec},
        )

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(
            f"Cannot import transform module '{module_name}': {e}",
            {"transform": spec},
        ) from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigError(
                f"Transform '{spec}' not found: {e}", {"transform": spec}
            ) from e

    if not callable(target):
        raise ConfigError(f"Transform '{spec}' is not callable", {"transform": spec})
    return target  # type: ignore[return-value]


def load_transforms(specs: Iterable[str]) -> tuple[Transform, ...]:
    """Resolve several transforms, keeping their order."""
    return tuple(load_transform(spec) for spec in specs)
