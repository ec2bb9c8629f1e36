"""PHP literal rendering for translation trees.

Renders a translation tree the way PHP's ``var_export()`` prints it, so the
generated file can be loaded with ``$translations = require 'messages.en.php';``.

Supported values:
- str      -> single-quoted string, only ``\\`` and ``'`` escaped
- bool     -> true / false
- None     -> NULL
- int      -> decimal literal within PHP's 64-bit range
- float    -> shortest round-trip literal (1.0, 0.5, 1.0E+25, INF, NAN)
- Mapping, list, tuple -> ``array ( key => value, ... )`` in iteration order
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Iterable, Tuple

from infrastructure.exporters.exceptions import UnsupportedValueError
from infrastructure.exporters.models import TranslationTree

PHP_OPEN_TAG = "<?php"
INDENT = "  "

# Largest exponent (and smallest, negated) var_export prints positionally.
_MAX_POSITIONAL_EXPONENT = 17
_MIN_POSITIONAL_EXPONENT = -4

# PHP reads integer literals outside this range as floats.
_PHP_INT_MIN = -(2**63)
_PHP_INT_MAX = 2**63 - 1


class PhpLiteralRenderer:
    """Recursive visitor over the translation tree alphabet."""

    def render(self, tree: TranslationTree) -> str:
        """Render a translation tree as a PHP literal expression.

        Args:
            tree: Scalar or nested mapping of translations.

        Returns:
            PHP literal, e.g. ``array (\\n  'hello' => 'Hello',\\n)``.

        Raises:
            UnsupportedValueError: If the tree holds a value outside the
                supported alphabet.
        """
        return self._render_value(tree, level=0, path=())

    def render_document(self, tree: TranslationTree) -> str:
        """Render a complete PHP file returning the translation tree."""
        return f"{PHP_OPEN_TAG}\nreturn {self.render(tree)};"

    def _render_value(self, value: Any, level: int, path: Tuple) -> str:
        if _is_array(value):
            return self._render_array(_array_items(value), level, path)
        return self._render_scalar(value, path)

    def _render_scalar(self, value: Any, path: Tuple) -> str:
        # bool before int: bool is an int subclass
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return _format_int(value, path)
        if isinstance(value, float):
            return _format_float(value)
        if isinstance(value, str):
            return _quote(value)
        raise UnsupportedValueError(value, path)

    def _render_array(self, items: Iterable[Tuple[Any, Any]], level: int, path: Tuple) -> str:
        outer = INDENT * level
        inner = INDENT * (level + 1)
        parts = ["array (\n"]
        for key, value in items:
            item_path = path + (key,)
            parts.append(f"{inner}{_render_key(key, item_path)} => ")
            if _is_array(value):
                parts.append("\n" + inner)
                parts.append(self._render_array(_array_items(value), level + 1, item_path))
            else:
                parts.append(self._render_scalar(value, item_path))
            parts.append(",\n")
        parts.append(outer + ")")
        return "".join(parts)


def _is_array(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _array_items(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _render_key(key: Any, path: Tuple) -> str:
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise UnsupportedValueError(key, path)
    if isinstance(key, int):
        return _format_int(key, path)
    return _quote(key)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    # NUL cannot appear inside a single-quoted PHP string
    escaped = escaped.replace("\0", "' . \"\\0\" . '")
    return f"'{escaped}'"


def _format_int(value: int, path: Tuple) -> str:
    if not _PHP_INT_MIN <= value <= _PHP_INT_MAX:
        raise UnsupportedValueError(value, path)
    # -9223372036854775808 would be parsed by PHP as a float
    if value == _PHP_INT_MIN:
        return f"{_PHP_INT_MIN + 1}-1"
    # int.__repr__ keeps IntEnum members as digits
    return int.__repr__(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    text = "".join(str(d) for d in digits)
    point = len(digits) + exponent
    adjusted = point - 1
    prefix = "-" if sign else ""

    if adjusted < _MIN_POSITIONAL_EXPONENT or adjusted >= _MAX_POSITIONAL_EXPONENT:
        mantissa = f"{text[0]}.{text[1:] or '0'}"
        exponent_sign = "+" if adjusted >= 0 else "-"
        return f"{prefix}{mantissa}E{exponent_sign}{abs(adjusted)}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= len(text):
        return f"{prefix}{text}{'0' * (point - len(text))}.0"
    return f"{prefix}{text[:point]}.{text[point:]}"


_renderer = PhpLiteralRenderer()


def render_php_literal(tree: TranslationTree) -> str:
    """Render a translation tree as a PHP literal expression."""
    return _renderer.render(tree)


def render_php_document(tree: TranslationTree) -> str:
    """Render ``<?php\\nreturn <literal>;`` for a translation tree."""
    return _renderer.render_document(tree)
