"""Classic interview data structures and algorithms: lists, stacks, trees, graphs, bits, recursion and small designs."""

__version__ = "0.1.0"