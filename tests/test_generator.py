"""
Tests for tablaverdad/table/generator.py and verdict.py.
"""

import pytest

from tablaverdad.config import MAX_INPUT_LENGTH
from tablaverdad.logic.parser import MAX_NESTING
from tablaverdad.table.generator import TruthTable, discover_variables, generate_truth_table
from tablaverdad.table.verdict import Verdict, classify


class TestDiscoverVariables:
    def test_canonical_order(self):
        assert discover_variables("t ∧ r ∨ p") == ["p", "r", "t"]

    def test_whole_word_only(self):
        assert discover_variables("pq") == []
        assert discover_variables("p∧q") == ["p", "q"]

    def test_independent_of_parsing(self):
        assert discover_variables("(p∧q") == ["p", "q"]

    def test_non_ascii_letters_are_boundaries(self):
        assert discover_variables("ñpñ") == ["p"]

    def test_none(self):
        assert discover_variables("") == []
        assert discover_variables("xyz") == []


class TestGenerateTruthTable:
    @pytest.mark.parametrize(
        "expression, n",
        [("p", 1), ("p ∧ q", 2), ("p ∨ q → r", 3), ("(p ↔ q) ∧ (r ∨ s)", 4), ("p∧q∧r∧s∧t", 5)],
    )
    def test_row_count(self, expression, n):
        table = generate_truth_table(expression)
        assert len(table.variables) == n
        assert len(table.rows) == 2**n
        assert all(len(row) == n + 1 for row in table.rows)

    def test_row_order_msb_first(self):
        table = generate_truth_table("p ∧ q ∧ r")
        for i, row in enumerate(table.rows):
            assert row[:-1] == [int(b) for b in format(i, "03b")]

    def test_implication_table(self):
        table = generate_truth_table("p → q")
        assert table.variables == ["p", "q"]
        assert table.rows == [[0, 0, 1], [0, 1, 1], [1, 0, 0], [1, 1, 1]]
        assert table.verdict is Verdict.CONTINGENCY

    def test_tautology(self):
        table = generate_truth_table("p∨¬p")
        assert table.results == [1, 1]
        assert table.verdict is Verdict.TAUTOLOGY
        assert str(table.verdict) == "Tautología"

    def test_contradiction(self):
        table = generate_truth_table("p∧¬p")
        assert table.results == [0, 0]
        assert str(table.verdict) == "Contradicción"

    def test_malformed_is_uniformly_false(self):
        table = generate_truth_table("(p∧q")
        assert table.variables == ["p", "q"]
        assert len(table.rows) == 4
        assert table.results == [0, 0, 0, 0]
        assert table.verdict is Verdict.CONTRADICTION

    def test_zero_variables(self):
        table = generate_truth_table("()")
        assert table.variables == []
        assert table.rows == [[0]]

    def test_zero_variables_from_glued_letters(self):
        # "pq" has no whole-word variable; evaluated once with {}
        assert generate_truth_table("pq").rows == [[0]]

    def test_unrecognized_characters(self):
        assert generate_truth_table("p @ ∧ q").rows == generate_truth_table("p∧q").rows

    def test_deep_nesting_at_limit(self):
        text = "(" * MAX_NESTING + "p" + ")" * MAX_NESTING
        assert generate_truth_table(text).results == [0, 1]

    def test_negation_chain_at_input_cap(self):
        text = "¬" * (MAX_INPUT_LENGTH - 2) + "p"
        assert generate_truth_table(text).results == [0, 1]

    def test_nesting_and_negation_near_cap(self):
        negations = MAX_INPUT_LENGTH - 2 * MAX_NESTING - 2
        text = "(" * MAX_NESTING + "¬" * negations + "p" + ")" * MAX_NESTING
        assert len(text) < MAX_INPUT_LENGTH
        assert generate_truth_table(text).results == [0, 1]

    def test_model_dump(self):
        table = generate_truth_table("¬p")
        assert table.model_dump() == {"variables": ["p"], "rows": [[0, 1], [1, 0]]}
        assert TruthTable.model_validate_json(table.model_dump_json()) == table


class TestClassify:
    def test_all_ones(self):
        assert classify([1, 1, 1]) is Verdict.TAUTOLOGY

    def test_all_zeros(self):
        assert classify([0]) is Verdict.CONTRADICTION

    def test_mixed(self):
        assert classify([0, 1, 1, 0]) is Verdict.CONTINGENCY
        assert str(Verdict.CONTINGENCY) == "Indeterminación"

    def test_empty(self):
        with pytest.raises(ValueError):
            classify([])
