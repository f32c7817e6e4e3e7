"""
Named sequence configurations.

Each module in this package defines ``params(**args)`` returning a
`halton.SequenceParams`.
"""
import importlib

presets = ["default", "wide", "compact", "classic"]

def get(name, **args):
    if name not in presets:
        raise ValueError("Unknown params {}, expected one of {}".format(name, ", ".join(presets)))
    return importlib.import_module("params." + name).params(**args)
