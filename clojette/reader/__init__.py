from clojette.reader.parser import scan, lex, parse, classify, read_forms, read_one

__all__ = ["scan", "lex", "parse", "classify", "read_forms", "read_one"]
