from risp.reader.tokenizer import tokenize
from risp.reader.parser import parse, parse_integer

__all__ = ["tokenize", "parse", "parse_integer"]
