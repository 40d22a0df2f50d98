"""
fix_commons – shared field generators for outgoing trading-session messages.

Import path convention::

    from fix_commons.application.fields import FieldGenerator
    from fix_commons.kernel.errors import InvalidArgumentError, ParseError
    from fix_commons.kernel.time import modify_datetime, SystemClock
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
