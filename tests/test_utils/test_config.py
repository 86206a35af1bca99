from pathlib import Path

import pytest

from beanwrap._utils import _get_option
from beanwrap.options import set_beanwrap_option


def test_defaults():
    assert _get_option("bundle_path") is None
    assert _get_option("strict") is False


def test_set_single_option():
    set_beanwrap_option("bundle_path", "/tmp/bundles")
    assert _get_option("bundle_path") == "/tmp/bundles"


def test_set_several_options():
    set_beanwrap_option(["bundle_path", "strict"], [Path("bundles"), True])
    assert _get_option("bundle_path") == Path("bundles")
    assert _get_option("strict") is True


def test_reset_bundle_path():
    set_beanwrap_option("bundle_path", "bundles")
    set_beanwrap_option("bundle_path", None)
    assert _get_option("bundle_path") is None


def test_unknown_option():
    with pytest.raises(KeyError, match="Invalid option key"):
        set_beanwrap_option("locale", "de")


def test_wrong_value_type():
    with pytest.raises(TypeError, match="'strict' must be one of: bool"):
        set_beanwrap_option("strict", "yes")


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        set_beanwrap_option(["bundle_path", "strict"], [None])


def test_values_must_be_iterable():
    with pytest.raises(TypeError, match="Values must be an iterable"):
        set_beanwrap_option(["strict"], True)
