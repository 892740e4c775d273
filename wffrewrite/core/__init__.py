"""
Core rewriting engine for wffrewrite.

Contains the rule store, structural pattern matching with variable
capture, template substitution, rule application over every position
of a formula, and the session that dispatches parsed commands.
"""
