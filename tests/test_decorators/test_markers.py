from dataclasses import FrozenInstanceError

import pytest

from beanwrap import Impact, attribute, bean, operation, param, parameter
from beanwrap._decorators import (
    AttributeMeta,
    BeanMeta,
    OperationMeta,
    ParameterMeta,
    _is_attribute,
    _is_bean,
    _is_operation,
)


@bean(description="A bean", resource_bundle="messages", sorted=True)
class MarkedBean:
    @attribute(name="Level", sort_key="1")
    def getLevel(self) -> int:
        return 1

    @operation(impact="action")
    @parameter("floor", name="Floor", description="Target floor")
    def move(self, floor: int) -> None:
        pass

    @parameter("floor", name="Floor")
    @operation
    def jump(self, floor: int) -> None:
        pass

    @operation
    @staticmethod
    def version() -> str:
        return "1.0"


class PlainSubclass(MarkedBean):
    pass


def test_bean_meta_attached():
    meta = MarkedBean._bean_meta
    assert isinstance(meta, BeanMeta)
    assert meta._description == "A bean"
    assert meta._resource_bundle == "messages"
    assert meta._sorted is True
    assert meta._strict is False
    assert meta._class_name == ""


def test_is_bean_for_classes_instances_and_subclasses():
    assert _is_bean(MarkedBean)
    assert _is_bean(MarkedBean())
    assert _is_bean(PlainSubclass())
    assert not _is_bean(object())


def test_bean_without_parentheses():
    @bean
    class Bare:
        pass

    assert Bare._bean_meta == BeanMeta(_bean=True)


def test_bean_rejects_functions():
    with pytest.raises(TypeError, match="can only decorate classes"):
        bean(lambda: None)


def test_attribute_meta_attached():
    meta = MarkedBean.getLevel._attribute_meta
    assert isinstance(meta, AttributeMeta)
    assert meta._name == "Level"
    assert meta._sort_key == "1"
    assert meta._description == ""
    assert _is_attribute(MarkedBean.getLevel)
    assert not _is_operation(MarkedBean.getLevel)


def test_attribute_rejects_non_callables():
    with pytest.raises(TypeError, match="can only decorate methods"):
        attribute(42)


def test_operation_impact_coerced_from_string():
    assert MarkedBean.move._operation_meta._impact is Impact.ACTION


def test_operation_impact_invalid():
    with pytest.raises(ValueError, match="Invalid impact"):
        operation(impact="DESTRUCTIVE")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, Impact.UNKNOWN),
        (Impact.INFO, Impact.INFO),
        ("ACTION_INFO", Impact.ACTION_INFO),
        ("info", Impact.INFO),
    ],
)
def test_impact_coerce(value, expected):
    assert Impact.coerce(value) is expected


def test_parameter_below_operation():
    meta = MarkedBean.move._operation_meta
    assert meta._params == {
        "floor": ParameterMeta(_name="Floor", _description="Target floor")
    }


def test_parameter_above_operation():
    meta = MarkedBean.jump._operation_meta
    assert meta._params["floor"]._name == "Floor"
    assert meta._params["floor"]._description == ""


def test_parameter_unknown_argument():
    with pytest.raises(ValueError, match="has no argument 'missing'"):

        @parameter("missing")
        def f(self, present: int) -> None:
            pass


def test_marker_on_staticmethod_lands_on_function():
    assert isinstance(MarkedBean.__dict__["version"], staticmethod)
    assert _is_operation(MarkedBean.version)


def test_param_helper():
    assert param("P", "desc") == ParameterMeta(_name="P", _description="desc")


def test_meta_immutable():
    meta = MarkedBean.move._operation_meta
    with pytest.raises(FrozenInstanceError):
        meta._name = "other"
    with pytest.raises(AttributeError):
        MarkedBean._bean_meta._sorted = False


def test_operation_meta_params_copy_on_access():
    meta = MarkedBean.move._operation_meta
    p1 = meta._params
    p1["other"] = ParameterMeta()
    p2 = meta._params
    assert p1 is not p2
    assert list(p2) == ["floor"]


def test_operation_meta_params_none_is_empty():
    meta = OperationMeta(_operation=True)
    assert meta._params == {}
