"""Run two commands as a pipeline between an input file and an output file, with PATH lookup."""

__version__ = "0.1.0"
__all__ = ["paths", "pipeline"]