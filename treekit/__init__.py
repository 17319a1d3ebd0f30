"""AVL trees, lazy segment trees and versioned sparse segment trees."""

__version__ = "0.1.0"
__all__ = ["avl", "dynamic_segment_tree", "static_segment_tree"]