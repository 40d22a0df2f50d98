"""Application fields – generated values for outgoing order messages."""
from fix_commons.application.fields.adjuster import DateTimeAdjuster, ModifyPatternAdjuster
from fix_commons.application.fields.generator import FieldGenerator

__all__ = ["DateTimeAdjuster", "FieldGenerator", "ModifyPatternAdjuster"]
