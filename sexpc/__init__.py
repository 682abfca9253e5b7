"""sexpc: a small S-expression front end lowering to LLVM IR"""

__version__ = "0.1.0"
