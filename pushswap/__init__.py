"""Two-stack sorting with a restricted set of operations, a solver and a sequence checker."""

__version__ = "1.0.0"