import pytest
from typing import Dict

from mixinject import ConformanceError, MixinLookupError, ValidationError
from mixinject.mixin import (
    ImmutableValidatorMixin,
    MutableValidatorMixin,
    RegistryAccessorMixin,
    RegistryMutatorMixin,
)


# -------------------------------------------------------------------
# Test classes for RegistryAccessorMixin
# -------------------------------------------------------------------


class DummyAccessor(RegistryAccessorMixin[str, int]):
    """Concrete implementation of RegistryAccessorMixin for testing."""

    def __init__(self, mapping: Dict[str, int]):
        self._repository = dict(mapping)

    def _get_mapping(self) -> Dict[str, int]:
        return self._repository


class TestRegistryAccessorMixin:
    """Tests for RegistryAccessorMixin."""

    @pytest.fixture
    def accessor(self):
        return DummyAccessor({"a": 1, "b": 2, "c": 3})

    def test_get_mapping_not_implemented(self):
        with pytest.raises(NotImplementedError):
            RegistryAccessorMixin()._get_mapping()

    def test_len_mapping(self, accessor):
        assert accessor._len_mapping() == 3

    def test_iter_mapping_is_snapshot(self, accessor):
        keys = accessor._iter_mapping()
        accessor._repository["d"] = 4
        assert list(keys) == ["a", "b", "c"]

    def test_get_artifact(self, accessor):
        assert accessor._get_artifact("b") == 2

    def test_get_artifact_missing(self, accessor):
        with pytest.raises(MixinLookupError):
            accessor._get_artifact("z")

    def test_has_identifier(self, accessor):
        assert accessor._has_identifier("a")
        assert not accessor._has_identifier("z")

    def test_assert_presence_failure_context(self, accessor):
        with pytest.raises(MixinLookupError) as excinfo:
            accessor._assert_presence("z")
        error = excinfo.value
        assert isinstance(error, LookupError)
        assert error.context["registry_type"] == "DummyAccessor"
        assert error.context["registry_size"] == 3
        assert error.context["available_keys"] == ["a", "b", "c"]
        assert any("register()" in suggestion for suggestion in error.suggestions)

    def test_available_keys_are_truncated(self):
        accessor = DummyAccessor({f"k{i}": i for i in range(12)})
        with pytest.raises(MixinLookupError) as excinfo:
            accessor._assert_presence("z")
        assert "(12 total)" in excinfo.value.context["available_keys"]


# -------------------------------------------------------------------
# Test classes for RegistryMutatorMixin
# -------------------------------------------------------------------


class DummyMutator(RegistryMutatorMixin[str, int]):
    """Concrete implementation of RegistryMutatorMixin for testing."""

    def __init__(self):
        self._repository = {"x": 10, "y": 20}

    def _get_mapping(self) -> Dict[str, int]:
        return self._repository


class TestRegistryMutatorMixin:
    """Tests for RegistryMutatorMixin."""

    @pytest.fixture
    def mutator(self):
        return DummyMutator()

    def test_set_artifact(self, mutator):
        mutator._set_artifact("z", 30)
        assert mutator._get_mapping() == {"x": 10, "y": 20, "z": 30}

    def test_set_artifact_overwrites(self, mutator):
        mutator._set_artifact("x", 100)
        assert mutator._get_mapping() == {"x": 100, "y": 20}

    def test_swap_artifact(self, mutator):
        assert mutator._swap_artifact("x", 10, 11)
        assert mutator._get_mapping()["x"] == 11

    def test_swap_artifact_stale(self, mutator):
        assert not mutator._swap_artifact("x", 99, 11)
        assert mutator._get_mapping()["x"] == 10

    def test_swap_artifact_missing(self, mutator):
        with pytest.raises(MixinLookupError):
            mutator._swap_artifact("z", 1, 2)


# -------------------------------------------------------------------
# Test classes for the validator mixins
# -------------------------------------------------------------------


class DummyValidator(MutableValidatorMixin[str, object]):
    """Concrete implementation of MutableValidatorMixin for testing."""

    def __init__(self, strict: bool = False, abstract: bool = False):
        self._repository = {}
        self._strict = strict
        self._abstract = abstract

    def _get_mapping(self):
        return self._repository


class TestImmutableValidatorMixin:
    """Tests for ImmutableValidatorMixin."""

    def test_get_artifact_validates_key(self):
        validator = DummyValidator()
        with pytest.raises(ValidationError):
            validator.get_artifact("")

    def test_get_artifact_missing(self):
        with pytest.raises(MixinLookupError):
            DummyValidator().get_artifact("missing")

    def test_has_identifier_invalid_key(self):
        assert not DummyValidator().has_identifier(["not", "hashable"])

    def test_is_read_only(self):
        assert not hasattr(ImmutableValidatorMixin, "register_artifact")


class TestMutableValidatorMixin:
    """Tests for MutableValidatorMixin."""

    def test_register_artifact(self):
        validator = DummyValidator()
        assert validator.register_artifact("a", list) is list
        assert validator.get_artifact("a") is list
        assert list(validator.iter_identifiers()) == ["a"]

    def test_register_artifact_invalid_key(self):
        validator = DummyValidator()
        with pytest.raises(ValidationError):
            validator.register_artifact(1, list)
        assert validator._repository == {}

    def test_register_artifact_strict_rejects_non_callable(self):
        validator = DummyValidator(strict=True)
        with pytest.raises(ConformanceError):
            validator.register_artifact("a", 5)
        assert validator._repository == {}

    def test_register_artifact_permissive_stores_anything(self):
        validator = DummyValidator()
        assert validator.register_artifact("a", 5) == 5

    def test_replace_artifact(self):
        validator = DummyValidator()
        validator.register_artifact("a", list)
        assert validator.replace_artifact("a", list, dict)
        assert not validator.replace_artifact("a", list, set)
        assert validator.get_artifact("a") is dict

    def test_internalize_extension_passthrough(self):
        assert DummyValidator()._internalize_extension(dict, list) is dict
