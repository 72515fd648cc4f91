from .bst import BST
from .errors import DuplicateKeyError, KeyNotFoundError, TreeError
from .treap import MAX_PRIORITY, Treap

__all__ = [
    'BST',
    'DuplicateKeyError',
    'KeyNotFoundError',
    'MAX_PRIORITY',
    'Treap',
    'TreeError',
]
