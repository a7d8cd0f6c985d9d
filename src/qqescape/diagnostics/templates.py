"""Error message templates.

Centralized message templates for testable, consistent diagnostics.
The message texts are part of the public contract: lexers match on them and
test suites compare them verbatim, so they are spelled exactly as users of
double-quotish escapes have always seen them.

Python 3.13+. Zero external dependencies.
"""

import math

from qqescape.diagnostics.codes import Diagnostic, DiagnosticCode
from qqescape.diagnostics.display import is_print_ascii
from qqescape.enums import Radix, WarningCategory

__all__ = ["ErrorTemplate", "format_hex_float"]


def format_hex_float(value: int | float) -> str:
    """Format ``value`` like C's ``%a`` conversion of a double.

    Values too large for a double, and infinity itself, format as ``inf``.

    Example:
        >>> format_hex_float(2**63)
        '0x1p+63'
        >>> format_hex_float(0x18)
        '0x1.8p+4'
    """
    try:
        number = float(value)
    except OverflowError:
        return "inf"
    if math.isinf(number):
        return "inf"
    text = number.hex()
    mantissa, exponent = text.split("p")
    mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}p{exponent}"


class ErrorTemplate:
    """Centralized diagnostic templates.

    All decoder messages are created here. NO f-strings in decoders!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past its bound.

        Args:
            position: Offset where the read was attempted

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected end of input at offset {position}",
        )

    # ------------------------------------------------------------------
    # \c
    # ------------------------------------------------------------------

    @staticmethod
    def control_not_printable() -> Diagnostic:
        """Target of \\c is not printable ASCII."""
        return Diagnostic(
            code=DiagnosticCode.CONTROL_NOT_PRINTABLE,
            message='Character following "\\c" must be printable ASCII',
            hint="Follow \\c with a character between ' ' and '~'",
        )

    @staticmethod
    def control_brace(control: int) -> Diagnostic:
        """Target of \\c is '{', which is reserved.

        Args:
            control: What ``\\c{`` would have decoded to

        Returns:
            Diagnostic for CONTROL_BRACE, recommending the literal character
            when it is printable
        """
        if is_print_ascii(control):
            message = f'Use "{chr(control)}" instead of "\\c{{"'
        else:
            message = 'Sequence "\\c{" invalid'
        return Diagnostic(code=DiagnosticCode.CONTROL_BRACE, message=message)

    @staticmethod
    def control_missing() -> Diagnostic:
        """\\c at end of input."""
        return Diagnostic(
            code=DiagnosticCode.CONTROL_MISSING,
            message="Missing control char name in \\c",
        )

    @staticmethod
    def control_more_clearly(source: int, clearer: str) -> Diagnostic:
        """\\c decodes to a printable character.

        Args:
            source: Byte written after \\c
            clearer: Plain spelling of the result

        Returns:
            SYNTAX warning for CONTROL_MORE_CLEARLY
        """
        return Diagnostic(
            code=DiagnosticCode.CONTROL_MORE_CLEARLY,
            message=f'"\\c{chr(source)}" is more clearly written simply as "{clearer}"',
            severity="warning",
            category=WarningCategory.SYNTAX,
        )

    # ------------------------------------------------------------------
    # \o{} and \x{}
    # ------------------------------------------------------------------

    @staticmethod
    def missing_braces_octal() -> Diagnostic:
        """\\o not followed by '{'."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_BRACES,
            message="Missing braces on \\o{}",
            hint="Write octal escapes as \\o{...}",
        )

    @staticmethod
    def missing_right_brace(radix: Radix) -> Diagnostic:
        """No closing '}' before the end of input.

        Note:
            The octal text omits the closing brace while the hex text keeps
            it. Both are long-standing spellings and are kept verbatim.
        """
        if radix is Radix.OCTAL:
            message = "Missing right brace on \\o{"
        else:
            message = "Missing right brace on \\x{}"
        return Diagnostic(code=DiagnosticCode.MISSING_RIGHT_BRACE, message=message)

    @staticmethod
    def empty_octal() -> Diagnostic:
        """\\o{} with nothing between the braces."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_ESCAPE,
            message="Empty \\o{}",
            hint="Put at least one octal digit between the braces",
        )

    @staticmethod
    def empty_hex(*, braced: bool) -> Diagnostic:
        """\\x{} (braced) or a trailing \\x (unbraced), in strict mode."""
        message = "Empty \\x{}" if braced else "Empty \\x"
        return Diagnostic(code=DiagnosticCode.EMPTY_ESCAPE, message=message)

    @staticmethod
    def codepoint_overflow(value: int | float, maximum: int, radix: Radix) -> Diagnostic:
        """Decoded value above the maximum legal codepoint.

        Args:
            value: The full value that was scanned
            maximum: Active maximum legal codepoint
            radix: Radix of the escape; selects how ``maximum`` is spelled

        Returns:
            Diagnostic for CODEPOINT_OVERFLOW
        """
        spelled = f"0{maximum:o}" if radix is Radix.OCTAL else f"0x{maximum:X}"
        message = (
            f"Use of code point {format_hex_float(value)} is not allowed; "
            f"the permissible max is {format_hex_float(maximum)} ({spelled})"
        )
        return Diagnostic(code=DiagnosticCode.CODEPOINT_OVERFLOW, message=message)

    @staticmethod
    def non_digit(radix: Radix) -> Diagnostic:
        """Strict mode: a byte inside the escape is not a digit."""
        code = (
            DiagnosticCode.NON_OCTAL_CHARACTER
            if radix is Radix.OCTAL
            else DiagnosticCode.NON_HEX_CHARACTER
        )
        return Diagnostic(code=code, message=f"Non-{radix.label} character")

    @staticmethod
    def too_many_hex_digits() -> Diagnostic:
        """Strict mode: three digits after an unbraced \\x."""
        return Diagnostic(
            code=DiagnosticCode.TOO_MANY_HEX_DIGITS,
            message="Use \\x{...} for more than two hex characters",
        )

    @staticmethod
    def alien_digit(message: str) -> Diagnostic:
        """Lenient mode: digit run ended early (text from alien_digit_message)."""
        return Diagnostic(
            code=DiagnosticCode.ALIEN_DIGIT,
            message=message,
            severity="warning",
            category=WarningCategory.DIGIT,
        )
