from abc import ABC, abstractmethod


class BST(ABC):
    """Minimal capability interface shared by the search trees.

    Keys must be totally ordered and unique within a tree. Values are
    opaque to the tree.
    """

    def __init__(self):
        self.root = None

    def empty(self):
        return self.root is None

    @abstractmethod
    def search(self, key):
        """Return ``(value, True)`` for a stored key, ``(None, False)`` otherwise."""

    @abstractmethod
    def insert(self, key, value):
        """Store ``value`` under ``key``; raise DuplicateKeyError if present."""

    @abstractmethod
    def remove(self, key):
        """Drop ``key`` from the tree; raise KeyNotFoundError if absent."""

    def __contains__(self, key):
        _, found = self.search(key)
        return found
