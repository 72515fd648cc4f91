class TreeError(Exception):
    """Base class for errors raised by the search trees."""


class DuplicateKeyError(TreeError, ValueError):
    def __init__(self, key):
        TreeError.__init__(self, 'Key {0!r} is already in the tree'.format(key))
        self.key = key


class KeyNotFoundError(TreeError, KeyError):
    def __init__(self, key):
        TreeError.__init__(self, 'Key {0!r} is not in the tree'.format(key))
        self.key = key

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]
