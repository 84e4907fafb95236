# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""Canonical type classification for any value"""

from dataclasses import dataclass
import datetime
import decimal
import fractions
import re
from typing import Any, FrozenSet, Tuple

from host_values import UNDEFINED, ScriptObject

@dataclass(frozen=True)
class TypeTag:
    """
    Constants for the canonical type tags reported by classify.
    """
    # pylint:disable=invalid-name,too-many-instance-attributes
    OBJECT: str = 'object'
    ARRAY: str = 'array'
    FUNCTION: str = 'function'
    STRING: str = 'string'
    NUMBER: str = 'number'
    BOOLEAN: str = 'boolean'
    DATE: str = 'date'
    REGEXP: str = 'regexp'
    ERROR: str = 'error'
    NULL: str = 'null'
    UNDEFINED: str = 'undefined'

KNOWN_TAGS: FrozenSet[str] = frozenset({
    TypeTag.OBJECT, TypeTag.ARRAY, TypeTag.FUNCTION, TypeTag.STRING, TypeTag.NUMBER,
    TypeTag.BOOLEAN, TypeTag.DATE, TypeTag.REGEXP, TypeTag.ERROR, TypeTag.NULL,
    TypeTag.UNDEFINED,
})
"""The closed tag vocabulary. Other values report their lowercased python type name."""
FOREIGN_TAG_PREFIX = 'python:'

@dataclass(frozen=True)
class TypeSets:
    """Groups of python data types that classify to the same tag"""
    number: Tuple[type, ...] = (int, float, complex, decimal.Decimal, fractions.Fraction)
    array: Tuple[type, ...] = (list, tuple)
    date: Tuple[type, ...] = (datetime.date,)
    """datetime.datetime is a subclass of datetime.date"""
    regexp: Tuple[type, ...] = (re.Pattern,)
    error: Tuple[type, ...] = (BaseException,)

def classify(value: Any) -> str:
    """
    Get the canonical type tag of a value.

    Example:
        classify(None)                  'null'
        classify(UNDEFINED)             'undefined'
        classify(re.compile(r'\\s'))     'regexp'
        classify(True)                  'boolean'
        classify([])                    'array'
        classify(1)                     'number'
        classify('hello')               'string'
        classify(datetime.date.today()) 'date'
        classify(ValueError())          'error'
        classify(lambda: None)          'function'
        classify(ScriptObject())        'object'

    Args:
        value (Any): the value to classify

    Returns (str) one of the KNOWN_TAGS, or the lowercased type name for values outside
        that vocabulary. A type name that collides with the vocabulary gets the
        FOREIGN_TAG_PREFIX.
    """
    # order matters: bool is an int, and a ScriptObject must never count as callable
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if isinstance(value, ScriptObject):
        return TypeTag.OBJECT
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, TypeSets.number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, TypeSets.array):
        return TypeTag.ARRAY
    if isinstance(value, TypeSets.date):
        return TypeTag.DATE
    if isinstance(value, TypeSets.regexp):
        return TypeTag.REGEXP
    if isinstance(value, TypeSets.error):
        return TypeTag.ERROR
    if callable(value):
        return TypeTag.FUNCTION
    type_name = type(value).__name__.lower()
    if type_name in KNOWN_TAGS:
        # a python class named like a tag, object() included
        return FOREIGN_TAG_PREFIX + type_name
    return type_name

def is_method_value(value: Any) -> bool:
    """True when value is a method (function) rather than a property"""
    return classify(value) == TypeTag.FUNCTION

# cSpell:words regexp
