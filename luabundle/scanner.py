"""
Require call scanner.

Finds literal require("a.b") / require('a.b') call sites in Lua source
using the lark tokenizer from grammar.py.
"""
from typing import List

from lark import Lark
from lark.exceptions import LexError
from pydantic import BaseModel

from luabundle.errors import LuaBundleError
from luabundle.grammar import lua_token_grammar


class RequireCall(BaseModel):
    """A literal require call site. start/end delimit the string literal token."""
    reference: str
    quote: str
    start: int
    end: int
    line: int


class RequireScanner:
    """
    Locates require calls whose only argument is a quoted string literal.

    Calls with any other argument (a variable, a concatenation, a long
    string) are not reported. Method calls such as lib.require("x") or
    obj:require("x") are not the global require and are skipped too.
    """

    def __init__(self):
        self._lexer = Lark(lua_token_grammar, parser=None, lexer='basic')

    def tokens(self, text):
        """
        Tokenize Lua source, dropping whitespace and comments.

        Raises:
            LuaBundleError: If the lexer rejects the text
        """
        try:
            return list(self._lexer.lex(text))
        except LexError as e:
            raise LuaBundleError(
                f"Could not tokenize source: {e}",
                line_number=getattr(e, 'line', None),
            ) from e

    def scan(self, text) -> List[RequireCall]:
        """Return the literal require calls in text, in order of appearance."""
        toks = self.tokens(text)
        calls = []
        for i, tok in enumerate(toks):
            if tok.type != 'NAME' or tok.value != 'require':
                continue
            if i > 0 and toks[i - 1].type == 'OPERATOR' and toks[i - 1].value in ('.', ':'):
                continue
            if len(toks) < i + 4:
                continue
            lpar, arg, rpar = toks[i + 1], toks[i + 2], toks[i + 3]
            if lpar.value != '(' or arg.type != 'STRING' or rpar.value != ')':
                continue
            calls.append(RequireCall(
                reference=arg.value[1:-1],
                quote=arg.value[0],
                start=arg.start_pos,
                end=arg.end_pos,
                line=arg.line,
            ))
        return calls
