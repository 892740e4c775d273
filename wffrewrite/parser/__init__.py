"""
Formula and command parser for wffrewrite.

Provides lexical analysis with source locations, the prefix formula
grammar, the command grammar, and AST construction for propositional
formulas built from not, and, or and imp.
"""
