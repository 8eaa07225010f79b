"""
dialect_forge - MySQL statement compiler.

Turns table, column, index and predicate descriptors into literal MySQL
statements for an ORM layer to hand to its driver.
"""

__version__ = "0.1.0"
