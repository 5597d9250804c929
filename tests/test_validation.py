"""Tests for the validation engine."""

import pytest

from efmodel.errors import (
    FieldLookupFailed,
    MissingDbSetForTable,
    MissingPrimaryKey,
    ValidationFailed,
)
from efmodel.model import DatabaseContext, DbSet, Field, Model, TableObject
from efmodel.validation import (
    check_dbset_coverage,
    check_primary_keys,
    default_validation_steps,
    validate_model,
)


@pytest.fixture
def model() -> Model:
    return Model(
        namespace="Shop",
        context=DatabaseContext(
            "ShopContext", [DbSet("order", "orders"), DbSet("item", "items")]
        ),
        objects=[
            TableObject(
                "order", key_name="id", fields=[Field("int", "id", ["Key"])]
            ),
            TableObject(
                "item", key_name="sku", fields=[Field("string", "sku", ["Key"])]
            ),
        ],
    )


class TestDefaultSteps:
    def test_order(self):
        assert default_validation_steps() == [
            check_dbset_coverage,
            check_primary_keys,
        ]

    def test_fresh_list_each_call(self):
        steps = default_validation_steps()
        steps.append(lambda m: None)
        assert len(default_validation_steps()) == 2


class TestBuiltinSteps:
    def test_valid_model_passes(self, model: Model):
        validate_model(model)

    def test_missing_dbset(self, model: Model):
        model.objects.append(
            TableObject("refund", key_name="id", fields=[Field("int", "id")])
        )
        with pytest.raises(MissingDbSetForTable) as exc_info:
            validate_model(model)
        assert exc_info.value.object_name == "refund"
        assert exc_info.value.context == "ShopContext"
        assert isinstance(exc_info.value, ValidationFailed)

    def test_unused_dbset_is_fine(self, model: Model):
        model.context.tables.append(DbSet("ghost", "ghosts"))
        validate_model(model)

    def test_missing_key_name(self, model: Model):
        model.objects[0].key_name = ""
        with pytest.raises(MissingPrimaryKey) as exc_info:
            validate_model(model)
        assert exc_info.value.object_name == "order"
        assert isinstance(exc_info.value.__cause__, FieldLookupFailed)

    def test_key_name_without_field(self, model: Model):
        model.objects[1].key_name = "code"
        with pytest.raises(MissingPrimaryKey) as exc_info:
            check_primary_keys(model)
        assert exc_info.value.key_name == "code"

    def test_dbset_checked_before_keys(self, model: Model):
        model.objects.append(TableObject("refund", fields=[Field("int", "n")]))
        with pytest.raises(MissingDbSetForTable):
            validate_model(model)


class TestCustomSteps:
    def test_steps_run_in_order(self, model: Model):
        calls = []
        steps = [
            lambda m: calls.append("first"),
            lambda m: calls.append("second"),
        ]
        validate_model(model, steps)
        assert calls == ["first", "second"]

    def test_first_failure_aborts(self, model: Model):
        calls = []

        def fail(m: Model) -> None:
            raise ValueError("custom rule")

        steps = [fail, lambda m: calls.append("after")]
        with pytest.raises(ValueError, match="custom rule"):
            validate_model(model, steps)
        assert calls == []

    def test_extend_defaults(self, model: Model):
        def no_strings_as_keys(m: Model) -> None:
            for obj in m.objects:
                if obj.get_key().type_name == "string":
                    raise ValidationFailed(f"{obj.class_name} has a string key")

        steps = default_validation_steps()
        steps.append(no_strings_as_keys)
        with pytest.raises(ValidationFailed, match="item has a string key"):
            validate_model(model, steps)

    def test_empty_step_list_skips_builtins(self, model: Model):
        model.objects[0].key_name = ""
        validate_model(model, [])
