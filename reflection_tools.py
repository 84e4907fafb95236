# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
`reflection tools`
==================

Meta objects that inspect another value.

ObjectIntrospector wraps an object, and answers questions about its properties and methods,
either own members only, or including those delegated through the prototype chain.
FunctionIntrospector wraps a function, and reports its name and parameter names.

    greeter = ScriptFunction('function Greeter(text) { }')
    greeter.prototype.set('hello', 'test')
    greeter.prototype.set('say_hello', ScriptFunction('function (name) { }'))

    meta = ObjectIntrospector(greeter.construct())
    meta.get_name()                         'Greeter'
    meta.has_property('hello')              True
    meta.has_property('hello', False)       False
    meta.get_methods()                      ['say_hello']
    meta.get_method_parameters('say_hello') ['name']
    meta.get_constructor_parameters()       ['text']
"""

from typing import Any, Callable, List

from host_values import (
    Member,
    iterate_attribute_names, has_own_attribute, has_attribute, get_attribute,
    render_source, declared_name,
)
from parameter_parser import parse_parameters
from reflection_error_framework import (
    NotAnObjectError, MethodNotFoundError, PropertyNotFoundError, NotACallableError,
)
from reflection_support import LoggerMixin
from type_classifier import TypeTag, classify, is_method_value

class ObjectIntrospector:
    """Inspect the properties and methods of a single object"""
    def __init__(self, target: Any):
        """
        Initialize the ObjectIntrospector.

        Args:
            target (Any): the object to inspect

        Raises
            NotAnObjectError when target is None, or does not classify as an object
        """
        if target is None or classify(target) != TypeTag.OBJECT:
            LoggerMixin.get_logger().debug('Cannot inspect %s value as an object',
                                           classify(target))
            raise NotAnObjectError()
        self._target = target

    @property
    def target(self) -> Any:
        """the object being inspected"""
        return self._target

    def has_property(self, name: str, include_delegated: bool = True) -> bool:
        """
        Check for a given property.

        Args:
            name (str): property name to check
            include_delegated (bool): True to look up the prototype chain as well, False to
                only look at the object itself.

        Returns (bool) True when name resolves to a value that is not a function
        """
        return self._resolves(name, include_delegated) and \
            not is_method_value(get_attribute(self._target, name))

    def has_method(self, name: str, include_delegated: bool = True) -> bool:
        """
        Check for a given method.

        Args:
            name (str): method name to check
            include_delegated (bool): True to look up the prototype chain as well, False to
                only look at the object itself.

        Returns (bool) True when name resolves to a function
        """
        return self._resolves(name, include_delegated) and \
            is_method_value(get_attribute(self._target, name))

    def get_name(self) -> str:
        """the declared name of the function that constructed the object"""
        return declared_name(self.get_constructor())

    def get_constructor(self) -> Callable:
        """the function that constructed the object"""
        return get_attribute(self._target, Member.CONSTRUCTOR)

    def get_constructor_parameters(self) -> List[str]:
        """the parameter names of the function that constructed the object"""
        return self.get_method_parameters(Member.CONSTRUCTOR)

    def get_method_parameters(self, name: str) -> List[str]:
        """
        Get the parameter names of a method, own or delegated.

        Args:
            name (str): method name

        Returns (List[str]) the method parameter names, in declaration order

        Raises
            MethodNotFoundError when name does not resolve to a method
        """
        return parse_parameters(render_source(self.get_method(name, True)))

    def get_methods(self, include_delegated: bool = True) -> List[str]:
        """
        Get the names of all the (enumerable) methods.

        Args:
            include_delegated (bool): True to include the prototype chain, False for own
                methods only.

        Returns (List[str]) method names, own methods first
        """
        return self._collect(self.has_method, include_delegated)

    def get_method(self, name: str, include_delegated: bool = True) -> Callable:
        """
        Get a specific method.

        Args:
            name (str): method name
            include_delegated (bool): True to look up the prototype chain as well, False to
                only look at the object itself.

        Returns (Callable) the method

        Raises
            MethodNotFoundError when name does not resolve to a method in the requested scope
        """
        if not self.has_method(name, include_delegated):
            LoggerMixin.get_logger().debug('Method "%s" not found on %r (include delegated: %s)',
                                           name, self._target, include_delegated)
            raise MethodNotFoundError()
        return get_attribute(self._target, name)

    def get_properties(self, include_delegated: bool = True) -> List[str]:
        """
        Get the names of all the (enumerable) properties.

        Args:
            include_delegated (bool): True to include the prototype chain, False for own
                properties only.

        Returns (List[str]) property names, own properties first
        """
        return self._collect(self.has_property, include_delegated)

    def get_property(self, name: str, include_delegated: bool = True) -> Any:
        """
        Get a specific property value.

        Args:
            name (str): property name
            include_delegated (bool): True to look up the prototype chain as well, False to
                only look at the object itself.

        Returns (Any) the property value

        Raises
            PropertyNotFoundError when name does not resolve to a property in the requested
                scope
        """
        if not self.has_property(name, include_delegated):
            LoggerMixin.get_logger().debug(
                'Property "%s" not found on %r (include delegated: %s)',
                name, self._target, include_delegated)
            raise PropertyNotFoundError()
        return get_attribute(self._target, name)

    def get_property_or_method(self, name: str, include_delegated: bool = True) -> Any:
        """
        Get a specific property value or method.

        Args:
            name (str): property or method name
            include_delegated (bool): True to look up the prototype chain as well, False to
                only look at the object itself.

        Returns (Any) the property value, or the method

        Raises
            PropertyNotFoundError when name does not resolve in the requested scope
        """
        if not self._resolves(name, include_delegated):
            LoggerMixin.get_logger().debug(
                'Property or method "%s" not found on %r (include delegated: %s)',
                name, self._target, include_delegated)
            raise PropertyNotFoundError()
        return get_attribute(self._target, name)

    def get_properties_and_methods(self, include_delegated: bool = True) -> List[str]:
        """the names of all (enumerable) properties and methods, in enumeration order"""
        return self._collect(
            lambda name, scope: self.has_property(name, scope) or self.has_method(name, scope),
            include_delegated)

    def _resolves(self, name: str, include_delegated: bool) -> bool:
        """True when name is a member of the object in the requested scope"""
        if include_delegated:
            return has_attribute(self._target, name)
        return has_own_attribute(self._target, name)

    def _collect(self, predicate: Callable[[str, bool], bool],
                 include_delegated: bool) -> List[str]:
        """enumerable member names that satisfy the predicate in the requested scope"""
        return [name for name in iterate_attribute_names(self._target)
                if predicate(name, include_delegated)]

    def __repr__(self) -> str:
        return f'ObjectIntrospector({self._target!r})'

class FunctionIntrospector:
    """Inspect the name and parameters of a single function"""
    def __init__(self, target: Any):
        """
        Initialize the FunctionIntrospector.

        Args:
            target (Any): the function to inspect

        Raises
            NotACallableError when target does not classify as a function
        """
        if classify(target) != TypeTag.FUNCTION:
            LoggerMixin.get_logger().debug('Cannot inspect %s value as a function',
                                           classify(target))
            raise NotACallableError()
        self._target = target

    @property
    def target(self) -> Callable:
        """the function being inspected"""
        return self._target

    def get_name(self) -> str:
        """the declared function name, or an empty string for an anonymous function"""
        return declared_name(self._target)

    def get_parameters(self) -> List[str]:
        """the function parameter names, in declaration order"""
        return parse_parameters(render_source(self._target))

    def __repr__(self) -> str:
        return f'FunctionIntrospector({self._target!r})'

# cSpell:words
# cSpell:ignore
