"""dagscope — directed-graph analysis: cycles, dependency order, paths."""

__version__ = "0.1.0"
