"""Elements, Gaussian basis functions, basis sets, LDA functionals, run settings and numeric diagnostics."""

__version__ = "0.1.0"