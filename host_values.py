# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
`host value model`
==================

The dynamic values the reflection tools inspect.

A ScriptObject is a composite: an ordered map of its own members, plus an optional
prototype ScriptObject that member lookup falls back to. A ScriptFunction is a callable
that keeps its own source text, and a prototype object for the instances it constructs.

The module level functions are the primitives the reflection tools are built on:
    iterate_attribute_names     own then delegated enumerable names
    has_own_attribute           own membership
    has_attribute               own or delegated membership
    get_attribute               resolve a name through the prototype chain
    render_source               the source text of a callable
    declared_name               the declared identifier of a callable
"""

from dataclasses import dataclass
import inspect
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Set

from parameter_parser import declared_function_name
from reflection_support import LoggerMixin, SentinelTag

@dataclass(frozen=True)
class Tag:
    """Constants for SentinelTag instances, to avoid possible typos in strings used to
    create or compare them.
    """
    UNDEFINED: str = 'undefined'
    DEFAULT_PROTOTYPE: str = 'Default object prototype'

@dataclass(frozen=True)
class Member:
    """Well known member names"""
    CONSTRUCTOR: str = 'constructor'
    NATIVE_BODY: str = '{ [native code] }'

UNDEFINED = SentinelTag(Tag.UNDEFINED)
"""The value of a member that does not exist"""

class ScriptObject:
    """
    A composite value with own members and an optional prototype to delegate to.

    Members defined with enumerable=False resolve normally, but are not reported by
    own_names() or iterate_attribute_names().
    """
    def __init__(self, members: Optional[Mapping[str, Any]] = None,
                 prototype: Any = SentinelTag(Tag.DEFAULT_PROTOTYPE)):
        """
        Args:
            members (Mapping): initial own (enumerable) members, in order
            prototype (ScriptObject|None): object to delegate member lookup to. Defaults to
                OBJECT_PROTOTYPE. None creates an object with no prototype.
        """
        self._members: Dict[str, Any] = {}
        self._hidden: Set[str] = set()
        self._prototype: Optional[ScriptObject] = None
        if prototype is SentinelTag(Tag.DEFAULT_PROTOTYPE):
            prototype = OBJECT_PROTOTYPE
        self.set_prototype(prototype)
        for name, value in (members or {}).items():
            self.set(name, value)

    @property
    def prototype(self) -> Optional['ScriptObject']:
        """the object that member lookup delegates to"""
        return self._prototype

    def set_prototype(self, prototype: Optional['ScriptObject']) -> None:
        """
        Change the object that member lookup delegates to.

        Args:
            prototype (ScriptObject|None): the new prototype

        Raises
            TypeError when prototype is not a ScriptObject or None, or when it would make the
                prototype chain circular.
        """
        if prototype is not None and not isinstance(prototype, ScriptObject):
            raise TypeError(f'Object prototype may only be a ScriptObject or None: '
                            f'got {type(prototype).__name__}')
        link = prototype
        while link is not None:
            if link is self:
                raise TypeError('Cyclic prototype chain')
            link = link.prototype
        self._prototype = prototype

    def set(self, name: str, value: Any) -> None:
        """Create or update an own member. An existing member keeps its enumerability."""
        self._members[name] = value

    def define(self, name: str, value: Any, enumerable: bool = True) -> None:
        """Create or replace an own member, with explicit enumerability."""
        self._members[name] = value
        if enumerable:
            self._hidden.discard(name)
        else:
            self._hidden.add(name)

    def delete(self, name: str) -> bool:
        """Remove an own member. Returns True if it existed."""
        self._hidden.discard(name)
        if name not in self._members:
            return False
        del self._members[name]
        return True

    def has_own(self, name: str) -> bool:
        """True when name is an own member (enumerable or not)"""
        return name in self._members

    def has(self, name: str) -> bool:
        """True when name resolves on this object or anywhere along the prototype chain"""
        return self._resolving_object(name) is not None

    def get(self, name: str) -> Any:
        """The value name resolves to, or UNDEFINED"""
        owner = self._resolving_object(name)
        return UNDEFINED if owner is None else owner._members[name]  # pylint:disable=protected-access

    def own_names(self, include_hidden: bool = False) -> Iterator[str]:
        """own member names in insertion order. Only enumerable names by default."""
        return (name for name in self._members if include_hidden or name not in self._hidden)

    def _resolving_object(self, name: str) -> Optional['ScriptObject']:
        link = self
        while link is not None:
            if name in link._members:  # pylint:disable=protected-access
                return link
            link = link.prototype
        return None

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __repr__(self) -> str:
        return f'ScriptObject({{{", ".join(self.own_names())}}})'

class ScriptFunction:
    """
    A callable value that carries its own source text.

    Usage:
        greeter = ScriptFunction('function Greeter(text) { this.text = text; }',
                                 implementation=lambda this, text: this.set('text', text))
        greeter.prototype.set('greet', ScriptFunction('function () {}'))
        instance = greeter.construct('hello')
    """
    def __init__(self, source: str, name: Optional[str] = None,
                 implementation: Optional[Callable[..., Any]] = None,
                 prototype: Any = SentinelTag(Tag.DEFAULT_PROTOTYPE)):
        """
        Args:
            source (str): the declaration source text of the function
            name (str): the declared name. Defaults to the identifier in a traditional
                declaration, or an empty string.
            implementation (Callable): called with (this, *args) when the function is
                invoked or constructs an instance. this is None for a plain call.
            prototype (ScriptObject): prototype for constructed instances. A new object is
                created when not supplied.
        """
        self.source = source
        self.name = declared_function_name(source) if name is None else name
        self.implementation = implementation
        if prototype is SentinelTag(Tag.DEFAULT_PROTOTYPE):
            prototype = ScriptObject()
        self.prototype: ScriptObject = prototype
        self.prototype.define(Member.CONSTRUCTOR, self, enumerable=False)

    def construct(self, *args) -> ScriptObject:
        """Create an instance delegating to this function's prototype, and initialize it."""
        instance = ScriptObject(prototype=self.prototype)
        if self.implementation is not None:
            self.implementation(instance, *args)
        return instance

    def __call__(self, *args) -> Any:
        if self.implementation is None:
            return UNDEFINED
        return self.implementation(None, *args)

    def __repr__(self) -> str:
        return f'ScriptFunction({self.name or "<anonymous>"})'

OBJECT_PROTOTYPE = ScriptObject(prototype=None)
"""The root prototype of ordinary ScriptObject instances"""
OBJECT_CONSTRUCTOR = ScriptFunction('function Object() ' + Member.NATIVE_BODY,
                                    prototype=OBJECT_PROTOTYPE)

def iterate_attribute_names(value: ScriptObject) -> Iterator[str]:
    """
    Enumerable member names of an object, following the prototype chain.

    Own names come first in insertion order, then the names of each prototype in chain
    order. A name already present closer to the object (enumerable or not) shadows the
    delegated one, which is skipped.

    Args:
        value (ScriptObject): the object to enumerate
    """
    seen: Set[str] = set()
    link = value
    while link is not None:
        for name in link.own_names():
            if name not in seen:
                yield name
        seen.update(link.own_names(include_hidden=True))
        link = link.prototype

def has_own_attribute(value: ScriptObject, name: str) -> bool:
    """True when name is a member stored directly on the object"""
    return value.has_own(name)

def has_attribute(value: ScriptObject, name: str) -> bool:
    """True when name is a member of the object or of any object in its prototype chain"""
    return value.has(name)

def get_attribute(value: ScriptObject, name: str) -> Any:
    """The value that name resolves to, own members first. UNDEFINED when not found."""
    return value.get(name)

def render_source(func: Callable) -> str:
    """
    Get the source text of a callable.

    A ScriptFunction provides its own source. Native python callables are rendered as a
    declaration with the parameter names from their signature, and a native code
    placeholder body:
        function name(a, b) { [native code] }

    Args:
        func (Callable): the function to render

    Returns (str) the function declaration source text
    """
    if isinstance(func, ScriptFunction):
        return func.source
    try:
        parameters = tuple(inspect.signature(func).parameters)
    except (ValueError, TypeError) as exc:
        LoggerMixin.get_logger().debug('No signature for native %r: %s', func, exc)
        parameters = tuple()
    return f'function {declared_name(func)}({", ".join(parameters)}) {Member.NATIVE_BODY}'

def declared_name(func: Any) -> str:
    """
    Get the declared identifier of a callable.

    Returns (str) the name, or an empty string for anonymous functions (including python
        lambda functions) and values that have no name.
    """
    if isinstance(func, ScriptFunction):
        return func.name
    name = getattr(func, '__name__', '')
    if not isinstance(name, str) or name == '<lambda>':
        return ''
    return name

# cSpell:words
# cSpell:ignore
