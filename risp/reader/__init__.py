from risp.reader.parser import lex, TokenStream, read

__all__ = ["lex", "TokenStream", "read"]
