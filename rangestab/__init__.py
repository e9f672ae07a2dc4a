"""AVL interval tree and a range-keyed mapping for point stabbing queries."""

__version__ = "0.1.0"
__all__ = ["interval_tree", "range_dict"]