"""Positions, line indexes, token queues and pair iterators for PEG parser output."""

__version__ = "0.1.0"
__all__ = ["flat_pairs", "line_index", "pair", "pairs", "position", "tokens"]