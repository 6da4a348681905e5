"""Tests for the enforcement layer.

Each enforcing function must raise iff the matching check reports a
violation, with exactly the text the check produced.
"""

import logging
import threading

import pytest

pytestmark = pytest.mark.unit

import precond
from precond import check

IRRELEVANT = "irrelevant in this test"


class TestSerenity:
    """Enforcement returns silently when predicates hold."""

    def test_is_true(self):
        assert precond.is_true(True, IRRELEVANT) is None

    def test_is_false(self):
        assert precond.is_false(False, IRRELEVANT) is None

    def test_is_none(self):
        assert precond.is_none(None, IRRELEVANT) is None

    def test_is_not_none(self):
        assert precond.is_not_none(object(), IRRELEVANT) is None

    def test_in_range_epsilon(self):
        assert precond.in_range_epsilon(0, 0, 0, 0.1, IRRELEVANT) is None

    def test_in_range(self):
        assert precond.in_range(1000, 0, 1000, IRRELEVANT) is None

    def test_passing_check_does_not_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="precond"):
            precond.is_true(True, IRRELEVANT)
        assert not caplog.records


class TestRaises:
    """Enforcement raises PreconditionViolation on violated predicates."""

    def test_is_true(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.is_true(False, IRRELEVANT)

    def test_is_false(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.is_false(True, IRRELEVANT)

    def test_is_none(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.is_none(0, IRRELEVANT)

    def test_is_not_none(self):
        with pytest.raises(precond.PreconditionViolation, match="^msg"):
            precond.is_not_none(None, "msg")

    def test_in_range_epsilon(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.in_range_epsilon(1, 0, 0, 0.1, IRRELEVANT)

    def test_in_range(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.in_range(1.001, 0, 1, IRRELEVANT)

    def test_violation_is_runtime_error(self):
        """PreconditionViolation is a RuntimeError subclass."""
        assert issubclass(precond.PreconditionViolation, RuntimeError)

    def test_violation_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="precond.enforce"):
            with pytest.raises(precond.PreconditionViolation):
                precond.is_true(False, "broken %s", "thing")
        assert any("broken thing" in record.getMessage() for record in caplog.records)


class TestMessages:
    """Raised text matches what the check layer would have produced."""

    def test_message_is_formatted_with_argument(self):
        with pytest.raises(precond.PreconditionViolation) as exc_info:
            precond.is_true(False, "value %s invalid", 42)
        assert str(exc_info.value).startswith("value 42 invalid")

    @pytest.mark.parametrize(
        "name, call_args",
        [
            ("is_true", (False,)),
            ("is_false", (True,)),
            ("is_none", ("set",)),
            ("is_not_none", (None,)),
            ("in_range_epsilon", (1, 0, 0, 0.1)),
            ("in_range", (1.001, 0, 1)),
        ],
    )
    def test_raised_text_equals_check_description(self, name, call_args):
        """Multiple arguments survive both layers unchanged."""
        template = "%s failed for %r and %d"
        args = ("check", "x", 3)
        expected = str(getattr(check, name)(*call_args, template, *args))

        with pytest.raises(precond.PreconditionViolation) as exc_info:
            getattr(precond, name)(*call_args, template, *args)

        assert str(exc_info.value) == expected
        assert expected == "check failed for 'x' and 3"

    def test_violation_payload_is_retrievable(self):
        with pytest.raises(precond.PreconditionViolation) as exc_info:
            precond.in_range(5, 0, 1, "%(value)s too large", {"value": 5})
        assert exc_info.value.description == "5 too large"
        assert exc_info.value.message.template == "%(value)s too large"


class TestIndependence:
    """Violations stay in the call and thread that raised them."""

    def test_failed_check_does_not_affect_later_checks(self):
        with pytest.raises(precond.PreconditionViolation):
            precond.is_true(False, IRRELEVANT)
        assert precond.is_true(True, IRRELEVANT) is None

    def test_violation_does_not_cross_threads(self):
        caught = []

        def worker():
            try:
                precond.is_not_none(None, "worker %s", "failed")
            except precond.PreconditionViolation as e:
                caught.append(str(e))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert caught == ["worker failed"]
