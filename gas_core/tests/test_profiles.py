"""Tests for the data profile catalog."""

import unittest

from gas_core.errors import UnknownProfile
from gas_core.models import TransactionShape
from gas_core.profiles import CUSTOM_PROFILE, apply_profile, list_profiles, lookup_profile


class DataProfileTests(unittest.TestCase):
    def test_catalog_contents(self) -> None:
        expected = {
            "text": (0, 1),
            "date": (2, 8),
            "number": (2, 2),
            "hash": (0, 32),
            "custom": (0, 0),
        }
        actual = {profile.name: (profile.zero_bytes, profile.non_zero_bytes) for profile in list_profiles()}

        self.assertEqual(actual, expected)
        self.assertEqual([profile.name for profile in list_profiles()], list(expected))

    def test_lookup_normalises_name(self) -> None:
        self.assertEqual(lookup_profile(" Hash ").non_zero_bytes, 32)
        self.assertEqual(lookup_profile("date").size, 10)

    def test_unknown_profile(self) -> None:
        with self.assertRaises(UnknownProfile):
            lookup_profile("address")
        with self.assertRaises(LookupError):
            apply_profile(TransactionShape(), "")

    def test_apply_overwrites_byte_counts(self) -> None:
        shape = TransactionShape(clause_count=2, zero_bytes=99, non_zero_bytes=99, gas_price_coef=10)

        updated = apply_profile(shape, "number")

        self.assertEqual((updated.zero_bytes, updated.non_zero_bytes), (2, 2))
        self.assertEqual(updated.clause_count, 2)
        self.assertEqual(updated.gas_price_coef, 10)
        self.assertEqual((shape.zero_bytes, shape.non_zero_bytes), (99, 99))

    def test_custom_keeps_entered_counts(self) -> None:
        shape = TransactionShape(zero_bytes=7, non_zero_bytes=11)

        self.assertIs(apply_profile(shape, CUSTOM_PROFILE), shape)

    def test_profile_serialises(self) -> None:
        self.assertEqual(
            lookup_profile("text").to_dict(),
            {"name": "text", "zero_bytes": 0, "non_zero_bytes": 1, "description": "Text (1 byte per character)"},
        )


if __name__ == "__main__":
    unittest.main()
