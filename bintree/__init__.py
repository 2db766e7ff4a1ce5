"""Binary trees with parent links: nodes, metrics, traversals, search trees and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["bst", "metrics", "node", "render", "traversal"]