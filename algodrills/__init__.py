"""Classic algorithm exercises: searching, arrays, strings, trees, lists, stacks, queues and contest problems."""

__version__ = "0.1.0"