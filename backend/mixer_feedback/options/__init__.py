"""
Option schemas for predicates.

- fields.py: typed option field declarations
- schema.py: OptionSchema and host value coercion
- pickers.py: capability-derived reusable pickers
"""

from .fields import Choice, OptionField, OptionKind, checkbox, dropdown, number, range_field
from .schema import OptionSchema

__all__ = [
    "Choice",
    "OptionField",
    "OptionKind",
    "OptionSchema",
    "checkbox",
    "dropdown",
    "number",
    "range_field",
]
