"""Sort integers with two stacks and a fixed set of operations, and check instruction lists."""

__version__ = "1.0.0"