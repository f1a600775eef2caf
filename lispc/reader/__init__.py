from lispc.reader.grammar import AstNode, Token, TokenStream, lex, parse
from lispc.reader.reader import read, read_number

__all__ = ("AstNode", "Token", "TokenStream", "lex", "parse", "read", "read_number")
