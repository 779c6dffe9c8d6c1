"""Tests for capability verification."""

import pytest

from protokit.capabilities.checker import has_all_methods_called, missing_methods

from sample_types import Temperature, UnitTestChildExample, UnitTestExample


class TestHasAllMethodsCalled:
    """Tests for has_all_methods_called."""

    @pytest.fixture
    def unit(self):
        return UnitTestExample()

    def test_regular_method(self, unit):
        assert has_all_methods_called(unit, ["fn1"]) is True

    def test_predicate_method(self, unit):
        assert has_all_methods_called(unit, ["fn2"]) is True

    def test_generator_method(self, unit):
        assert has_all_methods_called(unit, ["fn3"]) is True

    def test_coroutine_method(self, unit):
        assert has_all_methods_called(unit, ["fn7"]) is True

    def test_all_requested_methods_present(self, unit):
        assert has_all_methods_called(unit, ["fn1", "fn2", "fn3"]) is True

    def test_one_missing_method_fails_the_whole_check(self, unit):
        assert has_all_methods_called(unit, ["fn1", "fn200", "fn3"]) is False

    def test_none_of_the_methods_present(self, unit):
        assert has_all_methods_called(unit, ["fn100", "fn102", "fn103"]) is False

    @pytest.mark.parametrize("name", ["fn4", "fn5", "fn6"])
    def test_property_that_is_not_a_method(self, unit, name):
        assert has_all_methods_called(unit, [name]) is False

    def test_methods_defined_on_a_parent_class(self):
        unit = UnitTestChildExample()

        assert has_all_methods_called(unit, ["fn1", "fn8", "fn3"]) is True

    def test_empty_request_is_always_true(self, unit):
        assert has_all_methods_called(unit, []) is True
        assert has_all_methods_called(object(), []) is True
        assert has_all_methods_called(None, ()) is True

    def test_none_valued_attribute_is_not_callable(self, unit):
        unit.fn1 = None

        assert has_all_methods_called(unit, ["fn1"]) is False

    def test_class_subject_resolves_functions(self):
        assert has_all_methods_called(UnitTestExample, ["fn1", "fn2"]) is True

    def test_class_and_static_methods(self):
        assert has_all_methods_called(Temperature(3.0), ["freezing", "parse"]) is True

    def test_accessor_returning_plain_value_is_not_a_method(self):
        assert has_all_methods_called(Temperature(3.0), ["kelvin"]) is False

    def test_accessor_returning_callable_counts(self, make_template):
        Template = make_template("Template", handler=property(lambda self: print))

        assert has_all_methods_called(Template(), ["handler"]) is True

    def test_accepts_any_iterable_of_names(self, unit):
        assert has_all_methods_called(unit, (name for name in ["fn1", "fn2"])) is True

    def test_flipping_one_name_flips_the_result(self, unit):
        names = ["fn1", "fn2", "fn3"]
        assert has_all_methods_called(unit, names) is True

        unit.fn2 = "no longer callable"

        assert has_all_methods_called(unit, names) is False

    def test_does_not_mutate_subject(self, unit):
        before = dict(vars(unit))

        has_all_methods_called(unit, ["fn1", "missing"])

        assert vars(unit) == before


class TestMissingMethods:
    """Tests for missing_methods."""

    def test_reports_missing_names_in_request_order(self):
        unit = UnitTestExample()

        assert missing_methods(unit, ["fn5", "fn1", "nope"]) == ["fn5", "nope"]

    def test_nothing_missing(self):
        assert missing_methods(UnitTestChildExample(), ["fn1", "fn8"]) == []
