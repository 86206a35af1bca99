"""
This module provides a convenient entry point for setting global
configuration options for the beanwrap package.
"""

from beanwrap._utils import set_beanwrap_option

__all__ = ["set_beanwrap_option"]
