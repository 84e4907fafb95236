# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""Error class framework for the reflection tools

Every leaf error carries a single fixed message, and accepts no other details. Catch
ReflectionError to handle any of them.
"""

class ReflectionError(Exception):
    """Base class for reflection exceptions."""
    message: str = ''

    def __init__(self):
        super().__init__(self.message)

class ObjectReflectionError(ReflectionError):
    """Base class for failures inspecting an object."""

class NotAnObjectError(ObjectReflectionError):
    """The value to inspect is None, or is not an object."""
    message = 'Expected an object or function.'

class MethodNotFoundError(ObjectReflectionError):
    """The requested name does not resolve to a method in the requested scope."""
    message = 'The method does not exist on the object or function.'

class PropertyNotFoundError(ObjectReflectionError):
    """The requested name does not resolve to a (non callable) property in the
    requested scope."""
    message = 'The property does not exist on the object or function.'

class FunctionReflectionError(ReflectionError):
    """Base class for failures inspecting a function."""

class NotACallableError(FunctionReflectionError):
    """The value to inspect is not a function."""
    message = 'Expected a function.'
