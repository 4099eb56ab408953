"""Positional message formatting.

sprintf-like substitution on top of the ``%`` operator: each conversion is
formatted on its own, surplus arguments are ignored, missing ones leave their
placeholders in place, and failures fall back to the unformatted template.
A ``%`` that does not start a conversion is literal text.
"""

import math
import re
from typing import Any, Optional, Sequence

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# "%%" escape, or flags / width / precision / type with no space flag
CONVERSION_PATTERN = re.compile(
    r"%(?:(%)|[#0+-]*\d*(?:\.\d+)?([diouxXeEfFgGcrsa]))"
)
COUNT_PATTERN = re.compile(r"\s*([+-]?\d+)")

INTEGER_CONVERSIONS = frozenset("diouxX")
FLOAT_CONVERSIONS = frozenset("eEfFgG")


def count_conversions(template: str) -> int:
    """Count the argument-consuming conversions in a template.

    Args:
        template: printf-style template.

    Returns:
        Number of conversions, excluding "%%" escapes.
    """
    return sum(1 for match in CONVERSION_PATTERN.finditer(template) if match.group(2))


def coerce_argument(conversion: str, value: Any) -> Any:
    """Convert an argument to the type a numeric conversion expects.

    Integer conversions read strings and floats through parse_count ("3" -> 3),
    float conversions read strings through float(). Values that do not parse
    are returned unchanged.

    Args:
        conversion: Conversion type character (e.g. "d", "f", "s").
        value: Argument supplied by the caller.

    Returns:
        Coerced argument.
    """
    if conversion in INTEGER_CONVERSIONS and not isinstance(value, int):
        parsed = parse_count(value)
        return value if parsed is None else parsed
    if conversion in FLOAT_CONVERSIONS and isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def vsprintf(template: str, args: Sequence[Any], keep_escapes: bool = False) -> str:
    """Substitute positional arguments into a printf-style template.

    Conversions are filled left to right; once the arguments run out the
    remaining conversions are kept verbatim. With ``keep_escapes`` the output
    stays a valid template for another pass: "%%" is not unescaped and any
    "%" in substituted values is escaped.

    Args:
        template: Template with %s / %d style placeholders.
        args: Arguments applied in order.
        keep_escapes: Leave the result ready for a later vsprintf pass.

    Returns:
        Formatted string, or the template unchanged if formatting fails.
    """
    remaining = list(args)
    parts = []
    position = 0

    try:
        for match in CONVERSION_PATTERN.finditer(template):
            parts.append(template[position : match.start()])
            position = match.end()

            if match.group(1):
                parts.append("%%" if keep_escapes else "%")
            elif not remaining:
                parts.append(match.group(0))
            else:
                conversion = match.group(2)
                value = match.group(0) % (coerce_argument(conversion, remaining.pop(0)),)
                parts.append(value.replace("%", "%%") if keep_escapes else value)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(
            "format_failed",
            template=template,
            argument_count=len(args),
            error=str(e),
        )
        return template

    parts.append(template[position:])
    return "".join(parts)


def parse_count(value: Any) -> Optional[int]:
    """Parse a count the way an integer-prefix parser would.

    Ints are returned as-is, finite floats are truncated and strings are read
    up to the first non-digit ("3 apples" -> 3). Anything unparseable yields
    None, which never compares greater than one.

    Args:
        value: Count supplied by the caller.

    Returns:
        Parsed integer or None.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = COUNT_PATTERN.match(value)
        return int(match.group(1)) if match else None
    return None


def is_plural_count(value: Any) -> bool:
    """Check whether a count selects the "other" form.

    Args:
        value: Count supplied by the caller.

    Returns:
        True iff the parsed count is strictly greater than one.
    """
    count = parse_count(value)
    return count is not None and count > 1
