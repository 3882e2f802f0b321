from sketchunits.core.parser.parser import parse_unit_string
from sketchunits.core.parser.tokenizer import ParsedUnit, tokenize

__all__ = ["ParsedUnit", "parse_unit_string", "tokenize"]
