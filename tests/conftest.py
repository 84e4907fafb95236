# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""Shared fixtures for the reflection tests"""

import logging

import pytest

from host_values import ScriptFunction, ScriptObject
from reflection_support import ListHandler, LoggerMixin
from reflection_tools import ObjectIntrospector

SAY_GOODBYE_SOURCE = '''function (/* A comment */ param1, /* Another comment */ param2 /* A post comment */,
    // a line comment
    param3,
    param4) {

    return this.hello;
}'''

def _initialize_sample(this, param=None):
    this.set('hello', 'Hello World !')
    this.set('sayHello', ScriptFunction('function () { return this.hello; }'))
    this.set('sub', ScriptObject({
        'sayHello': ScriptFunction("function () { return 'Hi People !'; }"),
    }))

@pytest.fixture
def sample_constructor():
    """`function SampleObject(param)` with a data and a method member on its prototype"""
    constructor = ScriptFunction('''function SampleObject(param) {
    this.hello = 'Hello World !';
    this.sayHello = function () { return this.hello; };
    this.sub = { sayHello: function () { return 'Hi People !'; } };
}''', implementation=_initialize_sample)
    constructor.prototype.set('goodbye', 'test')
    constructor.prototype.set('sayGoodbye', ScriptFunction(SAY_GOODBYE_SOURCE))
    return constructor

@pytest.fixture
def sample_object(sample_constructor):
    """an instance of SampleObject"""
    return sample_constructor.construct()

@pytest.fixture
def meta_object(sample_object):
    """an ObjectIntrospector for the SampleObject instance"""
    return ObjectIntrospector(sample_object)

@pytest.fixture
def captured_log():
    """route the reflection logger to a ListHandler at DEBUG level"""
    logger = logging.getLogger('reflection.tests')
    logger.setLevel(logging.DEBUG)
    handler = ListHandler()
    handler.attach(logger)
    LoggerMixin.set_logger(logger)
    yield handler
    logger.removeHandler(handler)

@pytest.fixture(autouse=True)
def default_reflection_logger():
    """every test starts, and ends, with the default reflection logger"""
    LoggerMixin.set_logger(None)
    yield
    LoggerMixin.set_logger(None)
