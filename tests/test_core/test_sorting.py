from beanwrap import BeanWrapper, attribute, bean, operation


@bean(sorted=True)
class SortedBean:
    @attribute(sort_key="3")
    def getA1(self) -> int:
        return 1

    @attribute(sort_key="4")
    def getA2(self) -> int:
        return 2

    @attribute(sort_key="1")
    def getA3(self) -> int:
        return 3

    @attribute(sort_key="2")
    def getA4(self) -> int:
        return 4

    @operation(sort_key="3")
    def m1(self) -> None:
        pass

    @operation(sort_key="4")
    def m2(self) -> None:
        pass

    @operation(sort_key="1")
    def m3(self) -> None:
        pass

    @operation(sort_key="2")
    def m4(self) -> None:
        pass


@bean
class UnsortedBean:
    @attribute(sort_key="3")
    def getA1(self) -> int:
        return 1

    @attribute(sort_key="1")
    def getA2(self) -> int:
        return 2

    @operation(sort_key="2")
    def m1(self) -> None:
        pass

    @operation(sort_key="1")
    def m2(self) -> None:
        pass


@bean(sorted=True)
class NameSortedBean:
    @attribute
    def getZeta(self) -> int:
        return 0

    @attribute
    def getAlpha(self) -> int:
        return 0

    @attribute(sort_key="beta")
    def getOmega(self) -> int:
        return 0

    @operation(name="stop")
    def stop_first(self) -> None:
        pass

    @operation
    def reboot(self) -> None:
        pass

    @operation(name="stop")
    def stop_second(self, force: bool) -> None:
        pass


def test_sorted_attributes():
    info = BeanWrapper(SortedBean()).info
    assert [a.name for a in info.attributes] == ["a3", "a4", "a1", "a2"]


def test_sorted_operations():
    info = BeanWrapper(SortedBean()).info
    assert [o.name for o in info.operations] == ["m3", "m4", "m1", "m2"]


def test_unsorted_bean_keeps_discovery_order():
    info = BeanWrapper(UnsortedBean()).info
    assert [a.name for a in info.attributes] == ["a1", "a2"]
    assert [o.name for o in info.operations] == ["m1", "m2"]


def test_sort_by_name_without_sort_key():
    info = BeanWrapper(NameSortedBean()).info
    assert [a.name for a in info.attributes] == ["alpha", "omega", "zeta"]


def test_sort_is_stable_for_overloads():
    info = BeanWrapper(NameSortedBean()).info
    assert [(o.name, o.signature) for o in info.operations] == [
        ("reboot", ()),
        ("stop", ()),
        ("stop", ("bool",)),
    ]
