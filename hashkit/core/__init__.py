"""
Core hashing primitives and comparison strategies.

Pure, stateless building blocks: hash code combinators for collections
and equality comparers with configurable string comparison.
"""
