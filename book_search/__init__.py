"""
Book Search Package.

Finds exact, case-sensitive occurrences of a term in scanned book text and
reports the ISBN, page and line of every matching fragment.
"""

__version__ = "1.0.0"
