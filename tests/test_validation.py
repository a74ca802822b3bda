"""Unit tests for request body folding and declarative schema validation."""

import unittest

from app.api.body import fold_form_items
from app.core.errors import ValidationFailedError
from app.core.validation import validate_payload
from app.schemas.address import AddressCreate
from app.schemas.auth import SignUpRequest
from app.schemas.classroom import ClassroomCreate


class TestFoldFormItems(unittest.TestCase):
    def test_scalars_pass_through(self) -> None:
        self.assertEqual(
            fold_form_items([("username", "johndoe"), ("hash", "secret")]),
            {"username": "johndoe", "hash": "secret"},
        )

    def test_indexed_keys_become_ordered_list(self) -> None:
        folded = fold_form_items([("users[1]", "8"), ("name", "Class"), ("users[0]", "7")])
        self.assertEqual(folded, {"name": "Class", "users": ["7", "8"]})

    def test_empty_brackets_keep_submission_order(self) -> None:
        folded = fold_form_items([("users[]", "3"), ("users[]", "1")])
        self.assertEqual(folded["users"], ["3", "1"])

    def test_repeated_keys_become_list(self) -> None:
        folded = fold_form_items([("users", "1"), ("users", "2"), ("users", "3")])
        self.assertEqual(folded["users"], ["1", "2", "3"])

    def test_empty_form(self) -> None:
        self.assertEqual(fold_form_items([]), {})


class TestValidatePayload(unittest.TestCase):
    def test_valid_form_strings_are_coerced(self) -> None:
        parsed = validate_payload(
            ClassroomCreate, {"name": "Class A", "institutionId": "3", "users": ["1", "2"]}
        )
        self.assertEqual(parsed.institution_id, 3)
        self.assertEqual(parsed.users, [1, 2])

    def test_reports_every_violation(self) -> None:
        with self.assertRaises(ValidationFailedError) as ctx:
            validate_payload(AddressCreate, {"city": "NY", "unknown": "x"})
        fields = {v["field"] for v in ctx.exception.details}
        self.assertEqual(fields, {"city", "state", "country", "unknown"})
        self.assertEqual(ctx.exception.status_code, 400)

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(ValidationFailedError) as ctx:
            validate_payload(
                SignUpRequest,
                {"name": "John", "username": "johndoe", "hash": "s", "role": "USER", "isAdmin": "1"},
            )
        self.assertEqual([v["field"] for v in ctx.exception.details], ["isAdmin"])

    def test_username_bounds(self) -> None:
        for username in ("jo", "j" * 21):
            with self.subTest(username=username):
                with self.assertRaises(ValidationFailedError):
                    validate_payload(
                        SignUpRequest,
                        {"name": "John", "username": username, "hash": "s", "role": "USER"},
                    )

    def test_unknown_role_rejected(self) -> None:
        with self.assertRaises(ValidationFailedError):
            validate_payload(
                SignUpRequest,
                {"name": "John", "username": "johndoe", "hash": "s", "role": "OWNER"},
            )

    def test_classroom_needs_two_users(self) -> None:
        with self.assertRaises(ValidationFailedError):
            validate_payload(ClassroomCreate, {"name": "Class A", "users": ["1"]})


if __name__ == "__main__":
    unittest.main()
