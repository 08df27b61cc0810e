# coding: utf-8
import unittest

from boolsat.evaluate import evaluate
from boolsat.variables import get_variables

main = unittest.main


class TestCase(unittest.TestCase):
    """unittest.TestCase with model checking helpers."""

    def assertIsModel(self, expr, model, msg=None):
        """`model` is complete over `expr` and satisfies it."""
        self.assertIsNotNone(model, msg)
        for var in get_variables(expr):
            self.assertIn(var, model, msg)
        self.assertTrue(evaluate(expr, model), msg)
