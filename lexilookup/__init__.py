"""
lexilookup - Batch Dictionary Lookup Engine

Classifies words, phrases, sentences and native-language terms, resolves each
one through an ordered chain of dictionary providers, and returns results in
the order they were submitted.
"""

__version__ = "1.0.0"
__author__ = "lexilookup Contributors"
