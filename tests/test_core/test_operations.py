import logging

import pytest

from beanwrap import (
    BeanWrapper,
    InvocationError,
    OperationNotFoundError,
    bean,
    operation,
)


@bean
class OperationsBean:
    def __init__(self):
        self.calls = []

    @operation
    def voidMethod(self) -> None:
        self.calls.append("voidMethod")

    @operation
    def complexMethod(self, name: str, value: int) -> str:
        return f"Hello {name} {value}"

    @operation(name="Renamed Method")
    def renamed(self) -> str:
        return "renamed"

    @operation(name="m")
    def m1(self) -> str:
        return "Hello"

    @operation(name="m")
    def m2(self, a: str) -> str:
        return f"Hello {a}"

    @operation(name="m")
    def m3(self, a: str, b: str) -> str:
        return f"Hello {a} {b}"

    @operation
    def failing(self) -> None:
        raise KeyError("boom")

    @operation
    def nested(self, other: BeanWrapper) -> None:
        other.invoke("failing")

    @operation
    @staticmethod
    def version() -> str:
        return "1.0"

    @operation
    @classmethod
    def kind(cls) -> str:
        return cls.__name__

    def notAnOperation(self) -> str:
        return "hidden"


@bean
class DuplicateBean:
    @operation(name="reset")
    def reset_all(self) -> str:
        return "first"

    @operation
    def status(self) -> str:
        return "ok"

    @operation(name="reset")
    def reset_again(self) -> str:
        return "second"


@pytest.fixture
def target():
    return OperationsBean()


@pytest.fixture
def wrapper(target):
    return BeanWrapper(target)


def test_invoke_void(wrapper, target):
    assert wrapper.invoke("voidMethod") is None
    assert wrapper.invoke("voidMethod", [], []) is None
    assert target.calls == ["voidMethod", "voidMethod"]


def test_invoke_with_string_signature(wrapper):
    assert wrapper.invoke("complexMethod", ["Test", 2], ["str", "int"]) == "Hello Test 2"


def test_invoke_with_type_signature(wrapper):
    assert wrapper.invoke("complexMethod", ("Test", 2), (str, int)) == "Hello Test 2"


def test_invoke_renamed(wrapper):
    assert wrapper.invoke("Renamed Method") == "renamed"
    with pytest.raises(OperationNotFoundError):
        wrapper.invoke("renamed")


def test_overloads(wrapper):
    assert wrapper.invoke("m") == "Hello"
    assert wrapper.invoke("m", ["Two"], ["str"]) == "Hello Two"
    assert wrapper.invoke("m", ["Two", "Three"], ["str", "str"]) == "Hello Two Three"


def test_overload_descriptors(wrapper):
    overloads = wrapper.info.get_operation_descriptors("m")
    assert [o.signature for o in overloads] == [(), ("str",), ("str", "str")]


def test_operation_not_found(wrapper):
    with pytest.raises(OperationNotFoundError, match=r"Operation not found: unknown\(\)"):
        wrapper.invoke("unknown")


def test_wrong_signature(wrapper):
    with pytest.raises(OperationNotFoundError) as exc_info:
        wrapper.invoke("m", [1], ["int"])
    assert exc_info.value.signature == ("int",)
    assert str(exc_info.value) == "Operation not found: m(int)"


def test_unmarked_method_not_invokable(wrapper):
    with pytest.raises(OperationNotFoundError):
        wrapper.invoke("notAnOperation")


def test_invocation_error(wrapper):
    with pytest.raises(InvocationError) as exc_info:
        wrapper.invoke("failing")
    assert isinstance(exc_info.value.cause, KeyError)
    assert exc_info.value.member == "failing"


def test_nested_invocation_error_unwrapped(wrapper):
    inner = BeanWrapper(OperationsBean())
    with pytest.raises(InvocationError) as exc_info:
        wrapper.invoke("nested", [inner], [BeanWrapper])
    assert isinstance(exc_info.value.cause, KeyError)


def test_static_and_class_methods(wrapper):
    assert wrapper.invoke("version") == "1.0"
    assert wrapper.invoke("kind") == "OperationsBean"


def test_operation_return_types(wrapper):
    (void_method,) = wrapper.info.get_operation_descriptors("voidMethod")
    (nested,) = wrapper.info.get_operation_descriptors("nested")
    assert void_method.return_type == "None"
    assert nested.signature == ("beanwrap.core.wrapper.BeanWrapper",)


def test_duplicate_operation_shadows(caplog):
    with caplog.at_level(logging.WARNING, logger="beanwrap"):
        wrapper = BeanWrapper(DuplicateBean())

    assert wrapper.invoke("reset") == "second"
    assert [o.name for o in wrapper.info.operations] == ["status", "reset"]
    assert "declared twice" in caplog.text
