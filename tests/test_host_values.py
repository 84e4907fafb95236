# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""Tests for the host value model and its primitives"""

import pytest

import host_values
from host_values import (
    OBJECT_CONSTRUCTOR, OBJECT_PROTOTYPE, UNDEFINED, ScriptFunction, ScriptObject,
    declared_name, get_attribute, has_attribute, has_own_attribute, iterate_attribute_names,
    render_source,
)
from parameter_parser import parse_parameters


class TestScriptObjectLookup:
    """Own and delegated member resolution"""

    def test_own_and_delegated(self):
        """Own members resolve first, then the prototype chain."""
        parent = ScriptObject({'shared': 'parent', 'inherited': 2})
        child = ScriptObject({'shared': 'child', 'local': 1}, prototype=parent)
        assert child.get('local') == 1
        assert child.get('inherited') == 2
        assert child.get('shared') == 'child'
        assert child['inherited'] == 2
        assert 'inherited' in child

    def test_missing_member(self):
        """Unknown names resolve to UNDEFINED."""
        assert ScriptObject().get('nothing') is UNDEFINED
        assert not has_attribute(ScriptObject(), 'nothing')

    def test_own_membership(self):
        """has_own ignores the prototype chain."""
        child = ScriptObject({'local': 1}, prototype=ScriptObject({'inherited': 2}))
        assert has_own_attribute(child, 'local')
        assert not has_own_attribute(child, 'inherited')
        assert has_attribute(child, 'inherited')

    def test_default_prototype(self):
        """Ordinary objects delegate to the Object prototype."""
        plain = ScriptObject()
        assert plain.prototype is OBJECT_PROTOTYPE
        assert get_attribute(plain, 'constructor') is OBJECT_CONSTRUCTOR
        assert ScriptObject(prototype=None).get('constructor') is UNDEFINED

    def test_delete(self):
        """Deleting an own member uncovers the delegated one."""
        child = ScriptObject({'shared': 'child'}, prototype=ScriptObject({'shared': 'parent'}))
        assert child.delete('shared')
        assert not child.delete('shared')
        assert child.get('shared') == 'parent'

    def test_undefined_value_is_still_a_member(self):
        """A member explicitly holding UNDEFINED exists."""
        holder = ScriptObject({'empty': UNDEFINED})
        assert holder.has_own('empty')
        assert holder.delete('empty')


class TestPrototypeChain:
    """Changing the prototype"""

    def test_cycle_rejected(self):
        """A prototype chain can not loop back on itself."""
        first = ScriptObject()
        second = ScriptObject(prototype=first)
        with pytest.raises(TypeError, match='Cyclic prototype chain'):
            first.set_prototype(second)
        with pytest.raises(TypeError, match='Cyclic prototype chain'):
            first.set_prototype(first)
        assert first.prototype is OBJECT_PROTOTYPE

    def test_only_objects_allowed(self):
        """A prototype must be a ScriptObject or None."""
        with pytest.raises(TypeError, match='only be a ScriptObject or None'):
            ScriptObject(prototype={'a': 1})

    def test_clear_prototype(self):
        """None detaches the chain."""
        child = ScriptObject(prototype=ScriptObject({'inherited': 1}))
        child.set_prototype(None)
        assert child.get('inherited') is UNDEFINED


class TestIterateAttributeNames:
    """Enumeration order and shadowing"""

    def test_own_then_delegated(self):
        """Own names in insertion order, then prototype names in chain order."""
        grandparent = ScriptObject({'g': 0})
        parent = ScriptObject({'x': 1, 'y': 2}, prototype=grandparent)
        child = ScriptObject({'y': 3, 'z': 4}, prototype=parent)
        assert list(iterate_attribute_names(child)) == ['y', 'z', 'x', 'g']

    def test_hidden_members_not_enumerated(self):
        """Non enumerable members resolve, but are not listed."""
        holder = ScriptObject({'visible': 1})
        holder.define('hidden', 2, enumerable=False)
        assert list(iterate_attribute_names(holder)) == ['visible']
        assert holder.get('hidden') == 2

    def test_hidden_member_shadows_delegated(self):
        """A hidden own member still shadows an enumerable delegated one."""
        child = ScriptObject({'y': 3}, prototype=ScriptObject({'x': 1}))
        child.define('x', 5, enumerable=False)
        assert list(iterate_attribute_names(child)) == ['y']

    def test_define_enumerable_again(self):
        """Redefining as enumerable makes the member visible again."""
        holder = ScriptObject()
        holder.define('flag', True, enumerable=False)
        holder.define('flag', False)
        assert list(holder.own_names()) == ['flag']


class TestScriptFunction:
    """Callable values that keep their source"""

    def test_name_from_declaration(self):
        """The declared identifier is the default name."""
        assert ScriptFunction('function Greeter(text) {}').name == 'Greeter'
        assert ScriptFunction('(a) => a').name == ''
        assert ScriptFunction('function () {}', name='explicit').name == 'explicit'

    def test_construct(self):
        """Constructed instances delegate to the prototype, and are initialized."""
        greeter = ScriptFunction('function Greeter(text) {}',
                                 implementation=lambda this, text: this.set('text', text))
        greeter.prototype.set('greet', ScriptFunction('function () {}'))
        instance = greeter.construct('hi')
        assert instance.get('text') == 'hi'
        assert instance.prototype is greeter.prototype
        assert instance.get('constructor') is greeter
        assert not instance.has_own('greet')
        assert list(iterate_attribute_names(instance)) == ['text', 'greet']

    def test_call(self):
        """Calling runs the implementation without an instance."""
        double = ScriptFunction('x => x * 2', implementation=lambda this, x: (this, x * 2))
        assert double(4) == (None, 8)
        assert ScriptFunction('function () {}')() is UNDEFINED


class TestRenderSource:
    """Source text for script and native callables"""

    def test_script_function(self):
        """A ScriptFunction renders to its own source."""
        source = 'function f(a) { return a; }'
        assert render_source(ScriptFunction(source)) == source

    def test_native_function(self):
        """Native callables render a declaration from their signature."""
        def sample(alpha, beta=2, *rest, gamma, **options):  # pylint:disable=unused-argument
            return alpha
        rendered = render_source(sample)
        assert rendered == 'function sample(alpha, beta, rest, gamma, options) { [native code] }'
        assert parse_parameters(rendered) == ['alpha', 'beta', 'rest', 'gamma', 'options']

    def test_native_lambda(self):
        """Lambda functions render as anonymous declarations."""
        assert render_source(lambda a, b: a) == 'function (a, b) { [native code] }'

    def test_bound_method(self):
        """Bound methods do not report self."""
        class Sample:  # pylint:disable=too-few-public-methods
            """sample class"""
            def greet(self, name):
                """sample method"""
                return name
        assert parse_parameters(render_source(Sample().greet)) == ['name']

    def test_no_signature(self, monkeypatch, captured_log):
        """Callables without a signature render an empty parameter list."""
        def no_signature(_func):
            raise ValueError('no signature found')
        monkeypatch.setattr(host_values.inspect, 'signature', no_signature)
        assert render_source(len) == 'function len() { [native code] }'
        assert captured_log.messages()[0][0] == 'DEBUG'


class TestDeclaredName:
    """Callable identifiers"""

    def test_names(self):
        """Script, native, anonymous and nameless values."""
        assert declared_name(ScriptFunction('function Greeter() {}')) == 'Greeter'
        assert declared_name(len) == 'len'
        assert declared_name(lambda: None) == ''
        assert declared_name(UNDEFINED) == ''
        assert declared_name(OBJECT_CONSTRUCTOR) == 'Object'
