# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""Tests for the reflection error taxonomy"""

import pytest

from reflection_error_framework import (
    FunctionReflectionError, MethodNotFoundError, NotACallableError, NotAnObjectError,
    ObjectReflectionError, PropertyNotFoundError, ReflectionError,
)


class TestTaxonomy:
    """Families and leaves"""

    @pytest.mark.parametrize('error_class, family', [
        (NotAnObjectError, ObjectReflectionError),
        (MethodNotFoundError, ObjectReflectionError),
        (PropertyNotFoundError, ObjectReflectionError),
        (NotACallableError, FunctionReflectionError),
    ])
    def test_family(self, error_class, family):
        """Each leaf belongs to one family, under the common root."""
        assert issubclass(error_class, family)
        assert issubclass(error_class, ReflectionError)
        assert issubclass(ReflectionError, Exception)

    def test_families_are_distinct(self):
        """Object failures are not function failures."""
        assert not issubclass(NotACallableError, ObjectReflectionError)
        assert not issubclass(NotAnObjectError, FunctionReflectionError)


class TestMessages:
    """Every leaf carries a fixed message"""

    @pytest.mark.parametrize('error_class, message', [
        (NotAnObjectError, 'Expected an object or function.'),
        (MethodNotFoundError, 'The method does not exist on the object or function.'),
        (PropertyNotFoundError, 'The property does not exist on the object or function.'),
        (NotACallableError, 'Expected a function.'),
    ])
    def test_message(self, error_class, message):
        """str() of a raised error is its fixed message."""
        error = error_class()
        assert str(error) == message
        assert error.message == message
        assert error.args == (message,)

    def test_no_details_accepted(self):
        """The leaf errors take no arguments."""
        with pytest.raises(TypeError):
            NotAnObjectError('detail')  # pylint:disable=too-many-function-args
