from lispc.debug_utils.ast_print import ast_print, format_ast

__all__ = ("ast_print", "format_ast")
