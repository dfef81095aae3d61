"""Determinism tests for the gas fee engine."""

import os
import unittest

from gas_core.engine import calculate_fee
from gas_core.models import TransactionShape


class FeeEngineDeterminismTests(unittest.TestCase):
    def test_same_input_same_output(self) -> None:
        shape = TransactionShape(
            clause_count=3,
            zero_bytes=12,
            non_zero_bytes=40,
            vm_gas=25000,
            gas_price_coef=128,
            is_contract_creation=True,
        )

        first = calculate_fee(shape)
        second = calculate_fee(shape)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())
        self.assertIsNot(first, second)

    def test_keyword_order_does_not_change_output(self) -> None:
        shape_a = TransactionShape(
            clause_count=2,
            zero_bytes=2,
            non_zero_bytes=8,
            vm_gas=1000,
            gas_price_coef=85,
        )
        shape_b = TransactionShape(
            gas_price_coef=85,
            vm_gas=1000,
            non_zero_bytes=8,
            zero_bytes=2,
            clause_count=2,
        )

        self.assertEqual(calculate_fee(shape_a), calculate_fee(shape_b))

    def test_environment_changes_do_not_affect_output(self) -> None:
        shape = TransactionShape(clause_count=1, non_zero_bytes=32)

        baseline = calculate_fee(shape).to_dict()
        os.environ["VTHO_GAS_TEST_ENV"] = "changed"
        self.addCleanup(os.environ.pop, "VTHO_GAS_TEST_ENV", None)

        after = calculate_fee(shape).to_dict()

        self.assertEqual(baseline, after)

    def test_report_is_immutable(self) -> None:
        report = calculate_fee(TransactionShape())

        with self.assertRaises(AttributeError):
            report.total_gas = 0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
