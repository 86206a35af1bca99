from beanwrap.core._abstracts.wrapper import _BaseBeanWrapper

__all__ = ["_BaseBeanWrapper"]
