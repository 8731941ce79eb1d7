"""Data-structure and image exercises: PNG filters, stacks and queues, linked lists, a deque and binary trees."""

__version__ = "0.1.0"