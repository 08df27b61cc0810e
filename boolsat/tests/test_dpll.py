"""Tests for the backtracking solver."""
import pytest

from boolsat.allsat import brute_force_all_solutions
from boolsat.expr import and_, implies, not_, or_, xor
from boolsat.sat import (
    DPLLSolver,
    OccurrenceSelector,
    RandomSelector,
    SearchConfig,
    first_unassigned,
    get_initial_assignments,
    get_solution,
)
from boolsat.tests import TestCase, main
from boolsat.tests.grammar_gene import gen_random_exprs
from boolsat.utils.exceptions import StrategyContractError, UnassignedVariableError
from boolsat.utils.types import SolverResult, Value

COMPLEX = and_(not_("b"), or_("a", "b"), xor("b", "c"), implies("c", and_("d", "e")))
UNSAT = and_(not_("b"), or_("a", "b"), xor("b", "c"), implies("c", and_("d", "e")),
             not_("d"), xor("b", "e"))
PUZZLE = and_(
    xor("A", "B"),
    "A",
    or_("B", "C"),
    or_("C", "D"),
    or_("B", "D"),
    or_("E", "F"),
    or_("E", not_("F")),
    or_("F", "A"),
    implies("F", "G"),
    xor("G", "A"),
    and_("H", "I"),
    or_("H", "I"),
    xor("I", "J"),
)


class TestGetSolution(TestCase):

    def test_and(self):
        self.assertEqual(get_solution(and_("a", "b")), {"a": True, "b": True})

    def test_or(self):
        solution = get_solution(or_("a", "b"))
        self.assertIn(solution, brute_force_all_solutions(or_("a", "b")))
        # default strategy tries False first
        self.assertEqual(solution, {"a": False, "b": True})

    def test_not(self):
        self.assertEqual(get_solution(not_("b")), {"b": False})

    def test_implies(self):
        self.assertEqual(get_solution(implies("a", "b")), {"a": False, "b": False})

    def test_xor(self):
        self.assertEqual(get_solution(xor("a", "b")), {"a": False, "b": True})

    def test_complex(self):
        self.assertEqual(get_solution(COMPLEX),
                         {"a": True, "b": False, "c": True, "d": True, "e": True})

    def test_unsatisfiable(self):
        self.assertIsNone(get_solution(UNSAT))

    def test_puzzle(self):
        expected = {"A": True, "B": False, "C": True, "D": True, "E": True,
                    "F": False, "G": False, "H": True, "I": True, "J": False}
        self.assertEqual(get_solution(PUZZLE), expected)
        self.assertEqual(brute_force_all_solutions(PUZZLE), [expected])

    def test_no_variables(self):
        self.assertEqual(get_solution(and_()), {})
        self.assertIsNone(get_solution(or_()))

    def test_consistent_with_brute_force(self):
        for expr in gen_random_exprs(60, seed=11):
            all_solutions = brute_force_all_solutions(expr)
            strategies = [first_unassigned, OccurrenceSelector(expr), RandomSelector(seed=5)]
            for strategy in strategies:
                solution = get_solution(expr, select_next_var=strategy)
                if all_solutions:
                    self.assertIn(solution, all_solutions, str(expr))
                    self.assertIsModel(expr, solution)
                else:
                    self.assertIsNone(solution, str(expr))


class TestInitialAssignments(TestCase):

    def test_seeded_value_is_kept(self):
        self.assertEqual(get_solution(or_("a", "b"), {"a": True}), {"a": True, "b": False})
        self.assertEqual(get_solution(or_("a", "b"), {"a": Value.TRUE}),
                         {"a": True, "b": False})

    def test_contradicting_hypothesis(self):
        self.assertIsNone(get_solution(and_("a", "b"), {"a": False}))

    def test_unset_seed_is_searched(self):
        self.assertEqual(get_solution(and_("a", "b"), {"a": Value.UNSET}),
                         {"a": True, "b": True})

    def test_foreign_variables(self):
        self.assertEqual(get_solution(not_("b"), {"z": True}), {"b": False, "z": True})
        self.assertEqual(get_solution(not_("b"), {"z": Value.UNSET}), {"b": False})

    def test_caller_mapping_untouched(self):
        seed = {"a": True}
        get_solution(and_("a", "b"), seed)
        self.assertEqual(seed, {"a": True})

    def test_get_initial_assignments(self):
        self.assertEqual(get_initial_assignments(or_("b", "a"), {"a": False}),
                         {"b": Value.UNSET, "a": Value.FALSE})

    def test_bad_seed_value(self):
        with self.assertRaises(TypeError):
            get_solution(and_("a"), {"a": "yes"})


def test_unsat_search_visits_full_tree():
    res = DPLLSolver().solve(and_("a", "b", "c", not_("a")))
    assert res.result == SolverResult.UNSAT
    assert res.model is None
    assert res.stats.nodes == 2 ** 4 - 1
    assert res.stats.leaves == 2 ** 3
    assert res.stats.decisions == 2 ** 4 - 2
    assert res.stats.backtracks == 2 ** 3 - 1


def test_sat_result_record():
    res = DPLLSolver().solve(and_("a", not_("b")))
    assert res.is_sat
    assert res.model == {"a": True, "b": False}
    assert res.stats.runtime_sec >= 0.0


def test_strategy_changes_work_not_answer():
    expr = and_("a", "b", "c", "d")
    default = DPLLSolver().solve(expr)
    guided = DPLLSolver(OccurrenceSelector(expr)).solve(expr)
    assert default.model == guided.model == {"a": True, "b": True, "c": True, "d": True}
    assert default.stats.nodes == 31
    assert guided.stats.nodes == 5


def test_decision_budget():
    expr = and_("a", "b", "c", not_("a"))
    res = DPLLSolver(config=SearchConfig(max_decisions=3)).solve(expr)
    assert res.result == SolverResult.UNKNOWN
    assert res.model is None
    assert res.stats.decisions == 3

    res = DPLLSolver(config=SearchConfig(max_decisions=100)).solve(expr)
    assert res.result == SolverResult.UNSAT


def test_branches_get_private_copies():
    seen = []

    def recording(variables, assignments):
        seen.append((assignments, dict(assignments)))
        return first_unassigned(variables, assignments)

    get_solution(xor("a", "b"), select_next_var=recording)
    assert len(seen) > 1
    # nothing handed to the strategy was mutated afterwards
    for passed, snapshot in seen:
        assert passed == snapshot
    assert len({id(passed) for passed, _ in seen}) == len(seen)


def test_strategy_returning_assigned_variable():
    def sticky(variables, assignments):
        return variables[0], False

    with pytest.raises(StrategyContractError):
        get_solution(and_("a", "b"), select_next_var=sticky)


def test_strategy_returning_unknown_variable():
    with pytest.raises(StrategyContractError):
        get_solution(and_("a"), select_next_var=lambda variables, assignments: ("zzz", True))


def test_strategy_returning_garbage():
    with pytest.raises(StrategyContractError):
        get_solution(and_("a"), select_next_var=lambda variables, assignments: "a")


def test_strategy_stopping_early():
    def lazy(variables, assignments):
        return None

    with pytest.raises(StrategyContractError):
        get_solution(and_("a"), select_next_var=lazy)

    unchecked = DPLLSolver(lazy, SearchConfig(validate_strategy=False))
    with pytest.raises(UnassignedVariableError):
        unchecked.solve(and_("a"))


if __name__ == '__main__':
    main()
