"""Resolve ``module:ClassName`` targets to Fetchable config types."""

from __future__ import annotations

import importlib
import inspect
import logging

from fetchfile.fetchable import Fetchable

logger = logging.getLogger(__name__)

TARGET_SEPARATOR = ":"


def resolve_target(target: str) -> type[Fetchable]:
    """Import and validate the config type named by *target*.

    *target* has the form ``package.module:ClassName``; the attribute part
    may be dotted for nested classes.

    Raises:
        ValueError: The target is malformed, cannot be imported, is not a
            Fetchable subclass, or does not select a codec.
    """
    module_name, sep, attr_path = target.partition(TARGET_SEPARATOR)
    if not sep or not module_name or not attr_path:
        msg = f"Target must look like 'package.module:ClassName', got {target!r}"
        raise ValueError(msg)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise ValueError(msg) from exc

    obj: object = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"{module_name!r} has no attribute {attr_path!r}"
            raise ValueError(msg) from exc

    if not inspect.isclass(obj) or not issubclass(obj, Fetchable):
        msg = f"{target!r} is not a Fetchable subclass"
        raise ValueError(msg)

    try:
        obj.active_codec()
    except TypeError as exc:
        raise ValueError(str(exc)) from exc

    logger.debug("Resolved target %s -> %s", target, obj.__qualname__)
    return obj
