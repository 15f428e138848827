"""Classic algorithms and data structures: sorting, searching, number theory, text, puzzles, matrices, a calculator, linked lists, a hash table, stacks and queues, trees, graphs and contest problems."""

__version__ = "0.1.0"