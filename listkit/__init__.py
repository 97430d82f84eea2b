"""Linked chains, array lists, singly linked lists and stacks, with demos."""

__version__ = "0.1.0"
__all__ = ["arraylist", "chain", "demos", "singly_linked_list", "stack"]