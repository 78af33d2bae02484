"""
Lua Token Grammar.

This module contains the Lark grammar used to tokenize Lua source. Only the
lexer is used: comments are ignored and string literals come out as single
tokens, so require calls can be located without false positives.
"""

lua_token_grammar = r"""
    start: _token*

    _token: NAME | STRING | LONG_STRING | NUMBER | OPERATOR | OTHER

    // --- Comments ---
    // Long brackets close on the same number of '=' they opened with
    LONG_COMMENT.4: /--\[(?P<comment_level>=*)\[[\s\S]*?\](?P=comment_level)\]/
    LINE_COMMENT.3: /--[^\n]*/

    // --- Literals ---
    LONG_STRING.2: /\[(?P<string_level>=*)\[[\s\S]*?\](?P=string_level)\]/
    STRING.2: /"(?:[^"\\\n]|\\[\s\S])*"/
            | /'(?:[^'\\\n]|\\[\s\S])*'/
    NUMBER.1: /0[xX][0-9a-fA-F]*(?:\.[0-9a-fA-F]*)?(?:[pP][+-]?\d+)?|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?/

    // --- Names and punctuation ---
    NAME.1: /[A-Za-z_][A-Za-z0-9_]*/
    OPERATOR.1: /\.\.\.|\.\.|==|~=|<=|>=|<<|>>|\/\/|::|[-+*\/%^#&~|<>=(){}\[\];:,.]/

    // Any whitespace Python's \s knows, vertical tab and NBSP included
    WS: /\s+/

    // Anything else (shebang bangs, stray quotes, control bytes) is kept so lexing never fails
    OTHER: /[\s\S]/

    %ignore WS
    %ignore LONG_COMMENT
    %ignore LINE_COMMENT
"""
