"""NASTRAN Find: search a NASTRAN input deck and every file it INCLUDEs."""

__version__ = "0.1.0"
