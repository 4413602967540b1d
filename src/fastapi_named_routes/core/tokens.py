"""Path tokens for named route patterns.

Converts the slices of a route pattern into tokens:
- "" -> Token(text="") (the slice before the leading slash)
- "artikel" -> Token(text="artikel") (static segment)
- ":kategori" -> Token(text="kategori", input=True) (parameter)
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

_NON_IDENTIFIER_CHARS = re.compile(r"\W")


@dataclass(frozen=True)
class Token:
    """A slice of a route pattern, either static text or a parameter."""

    text: str
    input: bool = False

    def to_fastapi_segment(self) -> str:
        """Convert this token to FastAPI path syntax.

        Starlette only recognizes identifier parameter names, so any other
        character in a parameter name is replaced with an underscore.

        Examples:
            Token("artikel") -> "artikel"
            Token("kategori", input=True) -> "{kategori}"
            Token("slug-id", input=True) -> "{slug_id}"
        """
        if not self.input:
            return self.text
        return f"{{{fastapi_param_name(self.text)}}}"


def fastapi_param_name(text: str) -> str:
    """Return the identifier FastAPI uses for a parameter token's text."""
    name = _NON_IDENTIFIER_CHARS.sub("_", text)
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


def to_token(item: str) -> Token:
    """Convert a slice of a pattern to a Token.

    Examples:
        to_token("") -> Token(text="")
        to_token("artikel") -> Token(text="artikel")
        to_token(":kategori") -> Token(text="kategori", input=True)
        to_token(":slug-id") -> Token(text="slug-id", input=True)
    """
    if item.startswith(":"):
        return Token(text=item[1:], input=True)
    return Token(text=item)


def tokens_to_string(tokens: Iterable[Token]) -> str:
    """Render tokens back to a human readable pattern, mainly for logging.

    Example:
        tokens_to_string(route_table["article.category"].tokens)
            -> "/article/categories/:category"
    """
    return "/".join(f":{token.text}" if token.input else token.text for token in tokens)
