"""
wffrewrite: rewriting well-formed formulas of propositional logic.

Parses prefix-notation formulas, keeps a set of named rewrite rules
(pattern and template expressions with uppercase pattern variables),
and enumerates every one-step rewrite a rule produces on a formula.
"""

__version__ = "0.1.0"
