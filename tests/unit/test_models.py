"""Tests for engine types and the exception hierarchy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dialectbridge.exceptions import (
    AggregateArityError,
    AnalysisError,
    BackendError,
    DialectError,
    NoSuchNamespaceError,
    NoSuchObjectError,
    NoSuchTableError,
    ObjectKind,
    TableAlreadyExistsError,
    UnclassifiedError,
    UnsupportedFunctionError,
)
from dialectbridge.models.types import AbstractType, TypeKind


class TestAbstractType:
    def test_type_kind_values(self) -> None:
        assert TypeKind.STRING == "string"
        assert TypeKind.TIMESTAMP_NTZ == "timestamp_ntz"

    def test_decimal(self) -> None:
        dt = AbstractType.decimal(10, 2)
        assert dt.kind == TypeKind.DECIMAL
        assert (dt.precision, dt.scale) == (10, 2)
        assert dt.simple_string == "decimal(10,2)"

    def test_decimal_default(self) -> None:
        assert str(AbstractType.decimal()) == "decimal(10,0)"

    def test_varchar_simple_string(self) -> None:
        assert str(AbstractType.varchar(32)) == "varchar(32)"

    def test_plain_simple_string(self) -> None:
        assert str(AbstractType.boolean()) == "boolean"

    @pytest.mark.parametrize(("precision", "scale"), [(0, 0), (39, 2), (5, 6), (10, -1)])
    def test_invalid_decimal(self, precision: int, scale: int) -> None:
        with pytest.raises(ValidationError):
            AbstractType.decimal(precision, scale)

    def test_decimal_requires_parameters(self) -> None:
        with pytest.raises(ValidationError):
            AbstractType(kind=TypeKind.DECIMAL)

    def test_parameters_rejected_on_other_kinds(self) -> None:
        with pytest.raises(ValidationError):
            AbstractType(kind=TypeKind.INTEGER, precision=5, scale=0)
        with pytest.raises(ValidationError):
            AbstractType(kind=TypeKind.STRING, length=10)

    def test_varchar_requires_length(self) -> None:
        with pytest.raises(ValidationError):
            AbstractType(kind=TypeKind.VARCHAR)

    def test_frozen_and_hashable(self) -> None:
        dt = AbstractType.decimal(10, 2)
        with pytest.raises(ValidationError):
            dt.scale = 3  # type: ignore[misc]
        assert hash(dt) == hash(AbstractType.decimal(10, 2))


class TestExceptions:
    def test_backend_error(self) -> None:
        err = BackendError("boom", error_code=42101, sql_state="42S01")
        assert err.error_code == 42101
        assert err.sql_state == "42S01"
        assert str(err) == "boom"

    @pytest.mark.parametrize(
        "cls",
        [TableAlreadyExistsError, NoSuchTableError, NoSuchNamespaceError, UnclassifiedError],
    )
    def test_semantic_categories_carry_message_and_cause(
        self, cls: type[AnalysisError]
    ) -> None:
        cause = BackendError("vendor text", error_code=1)
        err = cls("engine text", cause=cause)
        assert isinstance(err, AnalysisError)
        assert err.message == "engine text"
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_not_found_kinds(self) -> None:
        assert issubclass(NoSuchTableError, NoSuchObjectError)
        assert NoSuchTableError("t").kind == ObjectKind.TABLE
        assert NoSuchNamespaceError("s").kind == ObjectKind.NAMESPACE

    def test_cause_is_optional(self) -> None:
        err = UnclassifiedError("msg")
        assert err.cause is None
        assert err.__cause__ is None

    def test_unsupported_function_error(self) -> None:
        err = UnsupportedFunctionError("h2", "WIDTH_BUCKET", "WIDTH_BUCKET(x, 0, 1, 2)")
        assert isinstance(err, DialectError)
        assert "WIDTH_BUCKET" in str(err)
        assert "'h2'" in str(err)
        assert "WIDTH_BUCKET(x, 0, 1, 2)" in str(err)

    def test_aggregate_arity_error(self) -> None:
        err = AggregateArityError("CORR", expected=2, actual=1)
        assert isinstance(err, DialectError)
        assert str(err) == "Aggregate CORR takes 2 argument(s), got 1"
