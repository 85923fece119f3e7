"""Long arithmetic, a phone book table, sparse matrices and expression stacks, with console shells."""

__version__ = "0.1.0"