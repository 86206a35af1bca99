import logging

import pytest

from beanwrap import (
    BeanDefinitionError,
    BeanWrapper,
    ConflictingDeclarationError,
    attribute,
    bean,
    operation,
)
from beanwrap.options import set_beanwrap_option


@bean
class SplitNamesBean:
    @attribute(name="level")
    def getLevel(self) -> int:
        return 1

    @attribute(name="floor")
    def setLevel(self, level: int) -> None:
        pass


@bean
class TwoGettersBean:
    @attribute(name="level")
    def getLevel(self) -> int:
        return 1

    @attribute(name="level")
    def getFloor(self) -> int:
        return 2


@bean
class DuplicateOperationsBean:
    @operation(name="reset")
    def reset_all(self) -> str:
        return "first"

    @operation(name="reset")
    def reset_again(self) -> str:
        return "second"


@bean(strict=True)
class StrictDuplicateBean(DuplicateOperationsBean):
    pass


def test_split_names_lenient(caplog):
    with caplog.at_level(logging.WARNING, logger="beanwrap"):
        info = BeanWrapper(SplitNamesBean()).info

    level = info.get_attribute_descriptor("level")
    floor = info.get_attribute_descriptor("floor")
    assert (level.readable, level.writable) == (True, False)
    assert (floor.readable, floor.writable) == (False, True)
    assert "different names" in caplog.text


def test_split_names_strict():
    with pytest.raises(ConflictingDeclarationError, match="different names"):
        BeanWrapper(SplitNamesBean(), strict=True)


def test_second_getter_replaces_first():
    wrapper = BeanWrapper(TwoGettersBean())
    assert len(wrapper.info.attributes) == 1
    assert wrapper.get_attribute("level") == 2


def test_second_getter_strict():
    with pytest.raises(ConflictingDeclarationError, match="replaces"):
        BeanWrapper(TwoGettersBean(), strict=True)


def test_duplicate_operation_strict_marker():
    with pytest.raises(ConflictingDeclarationError) as exc_info:
        BeanWrapper(StrictDuplicateBean())
    assert exc_info.value.bean_name == f"{__name__}.StrictDuplicateBean"
    assert isinstance(exc_info.value, BeanDefinitionError)
    assert isinstance(exc_info.value, ValueError)


def test_explicit_lenient_overrides_marker():
    wrapper = BeanWrapper(StrictDuplicateBean(), strict=False)
    assert wrapper.strict is False
    assert wrapper.invoke("reset") == "second"


def test_strict_option():
    set_beanwrap_option("strict", True)
    with pytest.raises(ConflictingDeclarationError):
        BeanWrapper(DuplicateOperationsBean())


def test_lenient_by_default():
    wrapper = BeanWrapper(DuplicateOperationsBean())
    assert wrapper.strict is False
    assert len(wrapper.info.operations) == 1
