class BeanError(Exception):
    """Base class for every error raised by beanwrap."""

    pass
