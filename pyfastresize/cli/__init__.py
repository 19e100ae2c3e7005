"""
Command Line Interface for PyFastResize

This module provides command line utilities for PyFastResize, giving access
to the resampler and the unsharp mask from the terminal without writing
Python scripts.

Available Commands:
- resize_image (pfr-resize): Resize an image file
- unsharp_image (pfr-unsharp): Sharpen an image file

Author: B.G.
"""

import importlib

_CLI_SUBMODULES = {
    "resize_image": (".resize_commands", "resize_image"),
    "unsharp_image": (".resize_commands", "unsharp_image"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    module_name, attr = info
    obj = getattr(importlib.import_module(module_name, __package__), attr)
    globals()[name] = obj
    return obj
