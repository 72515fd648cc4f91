import logging

logger = logging.getLogger(__name__)


class Utils:

    def keys_match(self, vert, key):
        return not (vert.key < key or key < vert.key)

    def advance_tree(self, vert, key):
        if key < vert.key:
            return vert.left
        elif vert.key < key:
            return vert.right

    def locate(self, key, root):
        vert = root
        while vert is not None and not self.keys_match(vert, key):
            vert = self.advance_tree(vert, key)
        return vert

    def locate_insertion_point(self, key, root):
        """Return the vertex holding ``key`` or, if there is none, the
        vertex the new key would hang from. ``None`` for an empty tree."""
        parent = child = root
        while True:
            if child is None:
                return parent

            parent = child
            if self.keys_match(child, key):
                return child
            child = self.advance_tree(child, key)

    def height(self, vert):
        if vert is None:
            return 0
        return 1 + max(self.height(vert.left), self.height(vert.right))

    def copy_from(self, vert, parent=None):
        if vert is None:
            return None

        duplicate = vert.replicate(parent)
        duplicate.left = self.copy_from(vert.left, duplicate)
        duplicate.right = self.copy_from(vert.right, duplicate)
        return duplicate

    def clear(self, vert):
        """Unlink every vertex below and including ``vert``, children first.

        Returns the number of vertices released."""
        if vert is None:
            return 0

        released = self.clear(vert.left) + self.clear(vert.right)
        vert.left = vert.right = vert.parent = None
        return released + 1


class TreapUtils(Utils):

    def rotate(self, vert):
        """Move ``vert`` one level up, above its current parent."""
        assert(vert.parent is not None), 'Trying to rotate the root'
        if vert.is_left_child():
            self.rotate_right(vert.parent)
        else:
            self.rotate_left(vert.parent)
        return vert

    def heavier_child(self, vert):
        # ties go to the left child
        if vert.left is None:
            return vert.right
        if vert.right is None:
            return vert.left
        if vert.left.priority >= vert.right.priority:
            return vert.left
        return vert.right

    def rotate_right(self, vert):
        left_child = vert.left
        logger.debug('Rotating right at %r, %r moves up', vert.key, left_child.key)

        if vert.parent is not None:
            if vert.is_left_child():
                vert.parent.left = left_child
            else:
                vert.parent.right = left_child
        left_child.parent = vert.parent

        vert.left = left_child.right
        if left_child.right is not None:
            left_child.right.parent = vert

        left_child.right = vert
        vert.parent = left_child

    def rotate_left(self, vert):
        right_child = vert.right
        logger.debug('Rotating left at %r, %r moves up', vert.key, right_child.key)

        if vert.parent is not None:
            if vert.is_left_child():
                vert.parent.left = right_child
            else:
                vert.parent.right = right_child
        right_child.parent = vert.parent

        vert.right = right_child.left
        if right_child.left is not None:
            right_child.left.parent = vert

        right_child.left = vert
        vert.parent = right_child
