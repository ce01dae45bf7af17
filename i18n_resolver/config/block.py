"""
i18n configuration block parser

Parses the directive block a host configuration file uses to enable the
translation functions:

    i18n {
        dict_file /etc/i18n/translations.json
    }

Arguments end at the end of a line. Double-quoted arguments may contain
spaces; a backslash escapes the next character inside quotes. Lines starting
with '#' are comments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from i18n_resolver.exceptions import ConfigBlockError

DIRECTIVE = "i18n"


class I18nBlockConfig(BaseModel):
    """Values collected from an i18n block"""

    dict_file: Optional[str] = Field(
        default=None,
        description="Path to the JSON file containing translation dictionaries"
    )


@dataclass(frozen=True)
class _Token:
    text: str
    line: int
    quoted: bool = False

    def is_punct(self, char: str) -> bool:
        return not self.quoted and self.text == char


def _tokenize(source: str) -> List[_Token]:
    tokens: List[_Token] = []
    for line_no, line in enumerate(source.splitlines(), start=1):
        i = 0
        n = len(line)
        while i < n:
            ch = line[i]
            if ch.isspace():
                i += 1
                continue
            if ch == "#":
                break
            if ch in "{}":
                tokens.append(_Token(ch, line_no))
                i += 1
                continue
            if ch == '"':
                i += 1
                buf = []
                closed = False
                while i < n:
                    ch = line[i]
                    if ch == "\\" and i + 1 < n:
                        buf.append(line[i + 1])
                        i += 2
                        continue
                    if ch == '"':
                        closed = True
                        i += 1
                        break
                    buf.append(ch)
                    i += 1
                if not closed:
                    raise ConfigBlockError("unterminated quoted argument", line=line_no)
                tokens.append(_Token("".join(buf), line_no, quoted=True))
                continue
            start = i
            while i < n and not line[i].isspace() and line[i] not in '{}"':
                i += 1
            tokens.append(_Token(line[start:i], line_no))
    return tokens


class _Dispenser:
    """Sequential token reader"""

    def __init__(self, tokens: List[_Token]):
        self._tokens = tokens
        self._pos = 0

    def peek(self) -> Optional[_Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def next(self) -> Optional[_Token]:
        token = self.peek()
        if token is not None:
            self._pos += 1
        return token

    def line_args(self, line: int) -> Iterator[_Token]:
        """Yield the remaining argument tokens on ``line``."""
        while True:
            token = self.peek()
            if token is None or token.line != line or token.is_punct("{") or token.is_punct("}"):
                return
            self._pos += 1
            yield token


def _parse_property(d: _Dispenser, name: _Token, config: I18nBlockConfig) -> None:
    args = list(d.line_args(name.line))
    if name.text == "dict_file":
        if len(args) != 1:
            raise ConfigBlockError(
                f"wrong argument count for dict_file: expected 1, got {len(args)}",
                line=name.line,
            )
        config.dict_file = args[0].text
        return
    raise ConfigBlockError(f"unrecognized i18n config property: {name.text}", line=name.line)


def parse_config_block(source: str) -> I18nBlockConfig:
    """
    Parse one or more ``i18n`` directives into an I18nBlockConfig.

    An empty block (or a bare directive) leaves dict_file unset.

    Raises:
        ConfigBlockError: unknown property, wrong argument count, unbalanced
            braces or an unexpected directive name
    """
    d = _Dispenser(_tokenize(source))
    config = I18nBlockConfig()

    while True:
        directive = d.next()
        if directive is None:
            break
        if directive.quoted or directive.text != DIRECTIVE:
            raise ConfigBlockError(
                f"expected '{DIRECTIVE}' directive, got '{directive.text}'", line=directive.line
            )
        extra = list(d.line_args(directive.line))
        if extra:
            raise ConfigBlockError(
                f"wrong argument count for {DIRECTIVE}: expected 0, got {len(extra)}",
                line=directive.line,
            )

        opener = d.peek()
        if opener is None or not opener.is_punct("{"):
            continue
        d.next()

        while True:
            token = d.next()
            if token is None:
                raise ConfigBlockError("unexpected end of input: missing '}'", line=opener.line)
            if token.is_punct("}"):
                break
            if token.is_punct("{"):
                raise ConfigBlockError("unexpected '{' inside i18n block", line=token.line)
            _parse_property(d, token, config)

    return config


def load_config_block(path: str) -> I18nBlockConfig:
    """Read and parse an i18n block from a file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_config_block(handle.read())
