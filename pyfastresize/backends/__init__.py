"""
Convolution backends for PyFastResize.

Backends are strategies for the separable convolution passes of a resize.
All of them produce the same bytes; they differ only in how the pass runs.

Available Backends:
- reference: Pure NumPy integer implementation (default, always available)
- taichi: Taichi kernel, CPU or GPU (requires `pip install taichi`)

Usage:
    import pyfastresize as pfr

    backend = pfr.backends.get_backend("taichi")
    out = pfr.resize(src, 640, 480, 320, 240, backend=backend)

Author: B.G.
"""

import importlib
import logging

from .. import constants as cte
from .base import ResizeBackend

log = logging.getLogger(__name__)

_BACKENDS = {
    "reference": (".reference", "ReferenceBackend"),
    "taichi": (".taichi_backend", "TaichiBackend"),
}

_INSTALL_HINTS = {
    "taichi": "Taichi is required for the 'taichi' backend. Install with: pip install taichi",
}

_instances = {}


def available_backends():
    """Names accepted by get_backend."""
    return list(_BACKENDS.keys())


def get_backend(backend=None, **kwargs):
    """
    Resolve a backend selector to a backend instance.

    Args:
        backend: None (default backend), a backend name, or an object
                 implementing ResizeBackend.convolve
        **kwargs: Constructor arguments for a named backend (e.g. arch='gpu');
                  instances created with arguments are not cached

    Returns:
        ResizeBackend: Backend instance

    Raises:
        ValueError: If the name is unknown
        ImportError: If the backend's library is not installed
    """
    if backend is None:
        backend = cte.DEFAULT_BACKEND
    if not isinstance(backend, str):
        if not callable(getattr(backend, "convolve", None)):
            raise TypeError("backend must be a name or provide a convolve() method")
        return backend

    name = backend.strip().lower()
    info = _BACKENDS.get(name)
    if info is None:
        raise ValueError(
            f"Unknown backend '{backend}', expected one of {available_backends()}"
        )

    if not kwargs and name in _instances:
        return _instances[name]

    module_name, attr = info
    try:
        module = importlib.import_module(module_name, __package__)
    except ImportError as e:
        hint = _INSTALL_HINTS.get(name)
        if hint is None:
            raise
        raise ImportError(f"{hint} ({e})") from e

    instance = getattr(module, attr)(**kwargs)
    log.debug("using %r", instance)
    if not kwargs:
        _instances[name] = instance
    return instance


__all__ = ["ResizeBackend", "available_backends", "get_backend"]
