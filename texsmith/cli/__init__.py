"""
Command Line Interface for texsmith

This module provides command line utilities for texsmith, enabling texture
generation from the terminal without writing Python scripts.

Available Commands:
- noise: Generate a noise texture (texsmith-noise)
- seed: Resolve a seed string to its numeric seed (texsmith-seed)

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise": (".noise_commands", "noise"),
    "seed": (".noise_commands", "seed"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
