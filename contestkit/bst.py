"""Unbalanced binary search tree; equal values go to the left."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Plain binary search tree with the four classic traversals."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value``; greater values go right, others left."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.right if value > node.value else node.left
        return False

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; False if none does."""
        parent, node = None, self.root
        while node is not None and node.value != value:
            parent, node = node, (node.left if value < node.value else node.right)
        if node is None:
            return False
        while node.left is not None and node.right is not None:
            smallest = node.right
            while smallest.left is not None:
                smallest = smallest.left
            target = smallest.value
            p, q = node, node.right
            while q.value != target:
                p, q = q, q.left
            node.value = target
            parent, node = p, q
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def minimum(self) -> Any:
        """The smallest value."""
        if self.root is None:
            raise ValueError("empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """The largest value."""
        if self.root is None:
            raise ValueError("empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def inorder(self) -> list[Any]:
        """Values in left, node, right order."""
        out, stack, node = [], [], self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            out.append(node.value)
            node = node.right
        return out

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        out = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return out

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        out = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return out[::-1]

    def level_order(self) -> list[Any]:
        """Values level by level, left to right."""
        out = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            out.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return out