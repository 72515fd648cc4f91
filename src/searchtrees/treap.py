import copy
import logging

import numpy as np

from .bst import BST
from .errors import DuplicateKeyError, KeyNotFoundError
from .utils import TreapUtils
from .vertex import Vertex

logger = logging.getLogger(__name__)

# priorities span the output range of a 32 bit Mersenne twister
MAX_PRIORITY = int(np.iinfo(np.uint32).max)


class Treap(BST):
    """Binary search tree kept as a max-heap on random vertex priorities.

    Priorities are drawn from a generator private to the tree. Pass ``seed``
    for a reproducible shape, or hand over a ready ``numpy.random.Generator``
    as ``rng``.
    """

    def __init__(self, seed=None, rng=None):
        BST.__init__(self)
        self._utils = TreapUtils()
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    class TreapVertex(Vertex):
        def __init__(self, key, value, parent, priority):
            Vertex.__init__(self, key, value, parent)
            self.priority = priority

        def replicate(self, parent):
            return Treap.TreapVertex(self.key, self.value, parent, self.priority)

    def _draw_priority(self):
        return int(self._rng.integers(0, MAX_PRIORITY, endpoint=True, dtype=np.uint32))

    def _create_vertex(self, key, value, parent):
        return self.TreapVertex(key, value, parent, self._draw_priority())

    def search(self, key):
        vert = self._utils.locate(key, self.root)
        if vert is None:
            return None, False
        return vert.value, True

    def insert(self, key, value):
        insertion_vertex = self._utils.locate_insertion_point(key, self.root)
        if insertion_vertex is not None and self._utils.keys_match(insertion_vertex, key):
            raise DuplicateKeyError(key)

        vert = self._create_vertex(key, value, insertion_vertex)
        logger.debug('Inserting %r with priority %d', key, vert.priority)
        if insertion_vertex is None:
            self.root = vert
            return

        insertion_vertex.attach(vert)
        while vert.parent is not None and vert.priority > vert.parent.priority:
            self.rotate(vert)

    def remove(self, key):
        vert = self._utils.locate(key, self.root)
        if vert is None:
            raise KeyNotFoundError(key)

        logger.debug('Removing %r', key)
        while not vert.is_leaf():
            self.rotate(self._utils.heavier_child(vert))

        if vert is self.root:
            self.root = None
        vert.detach()

    def rotate(self, vert):
        """Lift ``vert`` above its parent, keeping the root reference current."""
        self._utils.rotate(vert)
        if vert.parent is None:
            self.root = vert

    def height(self):
        return self._utils.height(self.root)

    def clear(self):
        released = self._utils.clear(self.root)
        self.root = None
        logger.debug('Cleared %d vertices', released)

    def copy(self):
        duplicate = Treap(rng=copy.deepcopy(self._rng))
        duplicate.root = self._utils.copy_from(self.root)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def swap(self, other):
        self.root, other.root = other.root, self.root
        self._rng, other._rng = other._rng, self._rng

    def assign(self, other):
        if other is self:
            return self
        replacement = other.copy()
        self.swap(replacement)
        replacement.clear()
        return self

    def print_tree(self, root='begin'):
        if root is not None:
            if root == 'begin':
                root = self.root
                if root is None:
                    return
            parent = root.parent
            right = root.right
            left = root.left

            print('CURRENT: ' + str(root.key))
            print('Priority: ' + str(root.priority))
            if parent:
                print('Parent: ' + str(parent.key))
            if left:
                print('Left: ' + str(left.key))
            if right:
                print('Right: ' + str(right.key))
            print('\n')

            self.print_tree(root.left)
            self.print_tree(root.right)
