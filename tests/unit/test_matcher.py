"""
Tests for structural pattern matching.

Tests cover atoms, variables and repeated-variable consistency,
operator and arity agreement, positional operand matching, boolean
constants, and the bindings produced by a successful match.
"""

from wffrewrite.core.matcher import match, match_with
from wffrewrite.parser.ast_nodes import Atom, Var
from wffrewrite.parser.formula import parse_formula


def _match(pattern: str, candidate: str):
    """Helper: match two formula strings with fresh bindings."""
    return match(parse_formula(pattern), parse_formula(candidate))


class TestLeaves:
    """Test atom and variable patterns."""

    def test_same_atom(self) -> None:
        assert _match("p", "p") == {}

    def test_different_atom(self) -> None:
        assert _match("p", "q") is None

    def test_atom_does_not_match_compound(self) -> None:
        assert _match("p", "(not p)") is None

    def test_variable_binds_anything(self) -> None:
        assert _match("X", "(and p (not q))") == {"X": parse_formula("(and p (not q))")}

    def test_variable_on_candidate_side(self) -> None:
        assert _match("p", "P") is None
        assert _match("(not p)", "(not P)") is None

    def test_variable_matches_variable(self) -> None:
        assert _match("X", "Y") == {"X": Var.named("Y")}


class TestRepeatedVariables:
    """A variable's first capture is fixed for the whole match."""

    def test_consistent_capture(self) -> None:
        assert _match("(and X X)", "(and p p)") == {"X": Atom.named("p")}

    def test_conflicting_capture(self) -> None:
        assert _match("(and X X)", "(and p q)") is None

    def test_compound_capture_compared_structurally(self) -> None:
        assert _match("(or X (not X))", "(or (and a b) (not (and a b)))") is not None
        assert _match("(or X (not X))", "(or (and a b) (not (and b a)))") is None

    def test_existing_binding_respected(self) -> None:
        bindings = {"X": Atom.named("q")}
        assert not match_with(parse_formula("(and X p)"), parse_formula("(and p p)"), bindings)

    def test_existing_binding_extended(self) -> None:
        bindings = {"X": Atom.named("p")}
        assert match_with(parse_formula("(and X Y)"), parse_formula("(and p q)"), bindings)
        assert bindings == {"X": Atom.named("p"), "Y": Atom.named("q")}


class TestOperators:
    """Test operator, arity and order agreement."""

    def test_not(self) -> None:
        assert _match("(not X)", "(not (or a b))") == {"X": parse_formula("(or a b)")}

    def test_operator_mismatch(self) -> None:
        assert _match("(and X Y)", "(or p q)") is None

    def test_unary_vs_nary(self) -> None:
        assert _match("(not X)", "(and p)") is None

    def test_arity_mismatch(self) -> None:
        assert _match("(and X Y)", "(and p q r)") is None

    def test_positional_not_commutative(self) -> None:
        assert _match("(and p X)", "(and q p)") is None
        assert _match("(and p X)", "(and p q)") == {"X": Atom.named("q")}

    def test_demorgan_bindings(self) -> None:
        assert _match("(not (and P Q))", "(not (and p q))") == {
            "P": Atom.named("p"),
            "Q": Atom.named("q"),
        }


class TestConstants:
    """Boolean constants match themselves only."""

    def test_true(self) -> None:
        assert _match("(and true X)", "(and true p)") == {"X": Atom.named("p")}

    def test_true_vs_false(self) -> None:
        assert _match("true", "false") is None

    def test_constant_vs_atom(self) -> None:
        assert _match("false", "f0") is None
