class Vertex:
    def __init__(self, key, value, parent):
        self.key = key
        self.value = value
        self.parent = parent
        self.right = None
        self.left = None

    def is_leaf(self):
        return True if self.left is None and self.right is None else False

    def is_left_child(self):
        return self.parent is not None and self.parent.left is self

    def is_right_child(self):
        return self.parent is not None and self.parent.right is self

    def attach(self, child):
        # child goes on the side its key dictates
        if child.key < self.key:
            self.left = child
        else:
            self.right = child
        child.parent = self

    def detach(self):
        if self.is_left_child():
            self.parent.left = None
        elif self.is_right_child():
            self.parent.right = None
        self.parent = None

    def replicate(self, parent):
        """Fresh vertex with the same key and value, hung from ``parent``."""
        return Vertex(self.key, self.value, parent)
