"""Unit tests for the Optional container."""

import pytest

from optional_value import (
    Optional, Present, Empty,
    empty, of, of_nullable,
    NullReferenceError, NoSuchElementError,
)


class TestCreation:
    """Tests for the three factories."""

    def test_empty_is_not_present(self):
        opt = empty()
        assert not opt.is_present()
        assert opt.is_empty()

    def test_of_wraps_value(self):
        opt = of("baeldung")
        assert opt.is_present()
        assert opt.get() == "baeldung"
        assert str(opt) == "Optional[baeldung]"

    def test_of_none_raises(self):
        with pytest.raises(NullReferenceError):
            of(None)

    def test_of_none_is_also_a_type_error(self):
        with pytest.raises(TypeError):
            of(None)

    def test_present_constructor_rejects_none(self):
        with pytest.raises(NullReferenceError):
            Present(None)

    def test_of_nullable_with_value(self):
        opt = of_nullable("baeldung")
        assert opt.is_present()
        assert str(opt) == "Optional[baeldung]"

    def test_of_nullable_with_none(self):
        opt = of_nullable(None)
        assert not opt.is_present()
        assert str(opt) == "Optional.empty"

    def test_falsy_values_are_present(self):
        for value in (0, "", [], False):
            assert of(value).is_present()
            assert of_nullable(value).is_present()

    def test_empty_is_shared(self):
        assert empty() is of_nullable(None)
        assert isinstance(empty(), Empty)
        assert isinstance(empty(), Optional)


class TestPresence:
    """Tests for is_present / is_empty consistency."""

    def test_is_empty_negates_is_present(self):
        for opt in (of("Baeldung"), of_nullable(None), empty()):
            assert opt.is_empty() is not opt.is_present()

    def test_present_then_empty(self):
        opt = of("Baeldung")
        assert opt.is_present()

        opt = of_nullable(None)
        assert not opt.is_present()


class TestGet:
    """Tests for unconditional extraction."""

    def test_get_on_present(self):
        assert of("baeldung").get() == "baeldung"

    def test_get_on_empty_raises(self):
        with pytest.raises(NoSuchElementError):
            of_nullable(None).get()

    def test_get_on_empty_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            empty().get()


class TestIfPresent:
    """Tests for conditional actions."""

    def test_if_present_runs_action(self):
        lengths = []
        result = of("baeldung").if_present(lambda name: lengths.append(len(name)))
        assert lengths == [8]
        assert result is None

    def test_if_present_on_empty_is_noop(self):
        calls = []
        empty().if_present(calls.append)
        assert calls == []

    def test_if_present_or_else(self):
        seen = []
        of("x").if_present_or_else(seen.append, lambda: seen.append("none"))
        empty().if_present_or_else(seen.append, lambda: seen.append("none"))
        assert seen == ["x", "none"]


class TestDefaults:
    """Tests for or_else, or_else_get and or_else_throw."""

    def test_or_else_on_empty(self):
        assert of_nullable(None).or_else("john") == "john"

    def test_or_else_on_present(self):
        assert of("jane").or_else("john") == "jane"

    def test_or_else_get_on_empty(self):
        assert of_nullable(None).or_else_get(lambda: "john") == "john"

    def test_or_else_get_supplier_is_lazy(self, default_producer):
        assert of("Text present").or_else_get(default_producer) == "Text present"
        assert default_producer.calls == 0

        assert empty().or_else_get(default_producer) == "Default Value"
        assert default_producer.calls == 1

    def test_or_else_argument_is_eager(self, default_producer):
        assert of("Text present").or_else(default_producer()) == "Text present"
        assert default_producer.calls == 1

    def test_or_else_throw_raises_supplied_error(self):
        with pytest.raises(ValueError):
            of_nullable(None).or_else_throw(ValueError)

    def test_or_else_throw_propagates_error_instance_unchanged(self):
        error = KeyError("missing")
        with pytest.raises(KeyError) as exc_info:
            empty().or_else_throw(lambda: error)
        assert exc_info.value is error

    def test_or_else_throw_on_present_skips_supplier(self):
        calls = []

        def factory():
            calls.append(1)
            return ValueError()

        assert of("value").or_else_throw(factory) == "value"
        assert calls == []

    def test_or_else_throw_without_supplier(self):
        with pytest.raises(NoSuchElementError):
            empty().or_else_throw()
        assert of(1).or_else_throw() == 1

    def test_or_returns_alternative_lazily(self):
        calls = []

        def alternative():
            calls.append(1)
            return of("fallback")

        assert of("primary").or_(alternative).get() == "primary"
        assert calls == []
        assert empty().or_(alternative).get() == "fallback"
        assert calls == [1]

    def test_or_supplier_returning_none_raises(self):
        with pytest.raises(NullReferenceError):
            empty().or_(lambda: None)


class TestFilter:
    """Tests for filter."""

    def test_filter_on_present(self):
        year = of(2019)
        assert year.filter(lambda y: y == 2019).is_present()
        assert not year.filter(lambda y: y == 2018).is_present()

    def test_filter_keeps_same_instance(self):
        opt = of(2019)
        assert opt.filter(lambda y: True) is opt

    def test_filter_on_empty_never_calls_predicate(self):
        calls = []

        def predicate(value):
            calls.append(value)
            return True

        assert empty().filter(predicate).is_empty()
        assert calls == []


class TestMap:
    """Tests for map and flat_map."""

    def test_map_on_present(self):
        assert of("baeldung").map(len).get() == 8

    def test_map_on_empty(self):
        assert empty().map(len).is_empty()

    def test_map_to_none_is_empty(self):
        assert of({"a": 1}).map(lambda d: d.get("b")).is_empty()

    def test_map_with_optional_returning_mapper_nests(self):
        nested = of("x").map(lambda v: of(v.upper()))
        assert isinstance(nested.get(), Present)
        assert nested.get().get() == "X"
        assert str(nested) == "Optional[Optional[X]]"

    def test_flat_map_collapses_nesting(self):
        flat = of("x").flat_map(lambda v: of(v.upper()))
        assert flat == of("X")
        assert str(flat) == "Optional[X]"

    def test_flat_map_returns_mapper_result_directly(self):
        inner = of(10)
        assert of(5).flat_map(lambda _: inner) is inner
        assert of(5).flat_map(lambda _: empty()).is_empty()

    def test_flat_map_on_empty(self):
        assert empty().flat_map(lambda v: of(v)).is_empty()

    def test_flat_map_returning_none_raises(self):
        with pytest.raises(NullReferenceError):
            of(5).flat_map(lambda _: None)


class TestValueSemantics:
    """Tests for equality, hashing, iteration and string forms."""

    def test_equality(self):
        assert of("a") == of("a")
        assert of("a") != of("b")
        assert empty() == Empty()
        assert of("a") != empty()
        assert empty() != of("a")

    def test_hash(self):
        assert hash(of("a")) == hash(of("a"))
        assert len({empty(), Empty(), of(1), of(1)}) == 2

    def test_unhashable_payload_makes_optional_unhashable(self):
        with pytest.raises(TypeError):
            hash(of([1]))
        assert of([1]) == of([1])

    def test_immutable(self):
        opt = of("a")
        with pytest.raises(AttributeError):
            opt.value = "b"

    def test_iteration(self):
        assert list(of("a")) == ["a"]
        assert list(empty()) == []
        assert list(of("a").stream()) == ["a"]
        assert list(empty().stream()) == []

    def test_to_nullable(self):
        assert of(42).to_nullable() == 42
        assert empty().to_nullable() is None

    def test_string_forms(self):
        assert str(of(2019)) == "Optional[2019]"
        assert str(empty()) == "Optional.empty"
        assert repr(empty()) == "Empty()"
