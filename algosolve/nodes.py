"""Binary tree and singly linked list node types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional[ListNode] = None