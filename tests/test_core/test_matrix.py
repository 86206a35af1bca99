import pandas as pd
import pytest

from beanwrap import BeanMatrix, BeanWrapper, Impact, attribute, bean, operation


@bean
class ConsoleBean:
    @attribute(description="The current floor", sort_key="a")
    def getLevel(self) -> int:
        return 0

    @attribute
    def setLevel(self, level: int) -> None:
        pass

    @attribute
    def getStatus(self) -> str:
        return "ok"

    @operation(impact=Impact.ACTION, description="Go back to the ground floor")
    def reset(self, hard: bool) -> None:
        pass


@bean
class EmptyBean:
    pass


def test_build_matrix():
    matrix = BeanWrapper(ConsoleBean()).build_matrix()

    expected = pd.DataFrame(
        [
            ["attribute", "level", "", "int", "read/write", "", "The current floor", "a"],
            ["attribute", "status", "", "str", "read-only", "", "", ""],
            [
                "operation",
                "reset",
                "bool",
                "None",
                "invoke",
                "ACTION",
                "Go back to the ground floor",
                "",
            ],
        ],
        columns=["kind", "name", "signature", "type", "access", "impact", "description", "sort_key"],
    ).set_index(["kind", "name", "signature"])

    pd.testing.assert_frame_equal(matrix, expected)


def test_matrix_lookup_by_index():
    matrix = BeanWrapper(ConsoleBean()).build_matrix()
    assert matrix.loc[("operation", "reset", "bool"), "impact"] == "ACTION"
    assert list(matrix.xs("attribute").index.get_level_values("name")) == ["level", "status"]


def test_empty_bean_matrix():
    matrix = BeanWrapper(EmptyBean()).build_matrix()
    assert matrix.empty
    pd.testing.assert_frame_equal(matrix, pd.DataFrame())


def test_matrix_requires_descriptor():
    with pytest.raises(TypeError, match="expects a BeanDescriptor"):
        BeanMatrix(ConsoleBean())
