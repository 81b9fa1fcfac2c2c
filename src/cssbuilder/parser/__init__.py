from cssbuilder.errors import SelectorParseError
from cssbuilder.parser.transformer import parse_selector

__all__ = ["SelectorParseError", "parse_selector"]
