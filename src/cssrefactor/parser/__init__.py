from cssrefactor.errors import ParseError
from cssrefactor.parser.reader import parse_css

__all__ = ["parse_css", "ParseError"]
