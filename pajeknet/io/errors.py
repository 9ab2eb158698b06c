from __future__ import annotations

from ._utils import line_for_display


class PajekFormatError(ValueError):
    """Input does not follow the supported Pajek subset.

    Attributes
    --
    line_number : int or None
        One-based physical line number of the offending line, ``None`` when the
        problem only shows at end of input.
    line : str or None
        The offending line, trimmed.
    reason : str
        The sentence describing the expected shape or violated constraint.

    """

    def __init__(self, message: str, *, line_number=None, line=None, reason=None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.reason = message if reason is None else reason

    @classmethod
    def at_line(cls, line: str, line_number: int, reason: str) -> PajekFormatError:
        shown = line_for_display(line)
        message = (
            f"Line {line_number:,} is not in the expected format.  "
            f'This is line {line_number:,}: "{shown}".  {reason}'
        )
        return cls(message, line_number=line_number, line=line, reason=reason)

    @classmethod
    def expected_format(cls, line: str, line_number: int, shape: str) -> PajekFormatError:
        return cls.at_line(line, line_number, f'The expected format is "{shape}".')
