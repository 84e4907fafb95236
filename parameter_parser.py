# SPDX-FileCopyrightText: 2024 H Phil Duby
# SPDX-License-Identifier: MIT

"""
`parameter list parser`
==================

Recover the declared parameter names of a function from its source text.

This is a lexical scan, not a parser. It understands two declaration shapes:
    function name(a, b) { … }       (optionally async, optionally a generator)
    (a, b) => …    and    a => …    (optionally async)

Comments and default value initializers are discarded. Quoted strings, comments, and a
single level of balanced parentheses inside the parameter list do not end it, and do not
split parameters. Destructured and rest parameters are not supported, and neither are
default values nesting parentheses more than one level deep, or holding a regular
expression literal: `function f(a = /x,y/, b)` splits at the comma inside the literal.
"""

from dataclasses import dataclass
import re
from typing import List, Tuple

from reflection_support import LoggerMixin, trim_excess

@dataclass(frozen=True)
class DeclarationForm:
    """Constants naming the declaration syntax that matched the source text."""
    TRADITIONAL: str = 'traditional'
    ARROW: str = 'arrow'

PARAMETER_DELIMITER = ','

# every comment, string and slash has exactly one way to match, so rejected text fails fast
_BLOCK_COMMENT = r'/\*[^*]*\*+(?:[^/*][^*]*\*+)*/'
_LINE_COMMENT = r'//[^\n]*(?![^\n])'
_STRING = (r"(?:'(?:\\.|[^'\\\n])*'"
           r'|"(?:\\.|[^"\\\n])*"'
           r'|`(?:\\[\s\S]|[^`\\])*`)')
_COMMENT = '(?:' + _LINE_COMMENT + '|' + _BLOCK_COMMENT + ')'
_SLASH = r'/(?![*/])'
_NESTED_GROUP = r'\((?:' + _STRING + '|' + _COMMENT + r'|[^()\'"`/]|' + _SLASH + r')*\)'
_IDENTIFIER = r'[A-Za-z_$][\w$]*'
_PARAMETER_TEXT = (r'\(\s*(?P<parameters>(?:' + _STRING + '|' + _COMMENT + '|' +
                   _NESTED_GROUP + r'|[^()\'"`/]|' + _SLASH + r')*?)\s*\)')
_DEFAULT_VALUE = (r'\s*=(?:' + _STRING + '|' + _COMMENT + '|' + _NESTED_GROUP +
                  r'|[^,()\'"`/]|' + _SLASH + ')*')

TRADITIONAL_PATTERN = re.compile(
    r'\s*(?:async\s+)?function\b\s*\*?\s*(?P<name>' + _IDENTIFIER + r')?[^(]*' +
    _PARAMETER_TEXT)
"""`function name(…)`, anchored at the start of the source text"""
ARROW_PATTERN = re.compile(
    r'\s*(?:async\s+)?(?:' + _PARAMETER_TEXT + r'|(?P<single>' + _IDENTIFIER + r'))\s*=>')
"""`(…) =>` or `identifier =>`, anchored at the start of the source text"""
STRIPPABLE_PATTERN = re.compile(
    _LINE_COMMENT + '|' + _BLOCK_COMMENT + '|' + _DEFAULT_VALUE)
"""line comments, block comments, and default value initializers, in that priority"""
WHITESPACE_PATTERN = re.compile(r'\s')

def match_parameter_text(source: str) -> Tuple[str, str]:
    """
    Locate the raw parameter list text in the source text of a function.

    Args:
        source (str): the rendered source text of a function

    Returns
        Tuple[str, str]: the DeclarationForm that matched, and the raw text between the
            parameter list parentheses (or the bare arrow function parameter). The raw text
            still includes any comments and default values.

    Raises
        ValueError when the source text is not a recognized function declaration
    """
    match = TRADITIONAL_PATTERN.match(source)
    if match:
        return DeclarationForm.TRADITIONAL, match.group('parameters')
    match = ARROW_PATTERN.match(source)
    if match:
        raw = match.group('parameters')
        return DeclarationForm.ARROW, raw if raw is not None else match.group('single')
    LoggerMixin.get_logger().debug('No function declaration found in "%s"',
                                   trim_excess(source, 60))
    raise ValueError(f'Unrecognized function declaration: "{trim_excess(source, 60)}"')

def declared_function_name(source: str) -> str:
    """
    Get the identifier from a traditional function declaration.

    Args:
        source (str): the source text of a function

    Returns (str) the declared name, or an empty string for anonymous and arrow functions
        and for text that is not a function declaration at all.
    """
    match = TRADITIONAL_PATTERN.match(source)
    if match and match.group('name'):
        return match.group('name')
    return ''

def parse_parameters(source: str) -> List[str]:
    """
    Extract the ordered parameter names from the source text of a function.

    Example:
        parse_parameters('function f(/* c */ a, b = "x, y", c) {}')
        gives
        ['a', 'b', 'c']

    Args:
        source (str): the rendered source text of a function

    Returns
        List[str]: parameter names in declaration order. Duplicates are kept.

    Raises
        ValueError when the source text is not a recognized function declaration
    """
    _form, raw = match_parameter_text(source)
    if not raw:
        return []
    cleaned = WHITESPACE_PATTERN.sub('', STRIPPABLE_PATTERN.sub('', raw))
    if not cleaned:
        return []  # only comments
    names = cleaned.split(PARAMETER_DELIMITER)
    if len(names) > 1 and names[-1] == '':
        names.pop()  # trailing comma
    return names

# cSpell:words
# cSpell:ignore
