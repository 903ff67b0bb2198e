from typing import Optional


class FormulaError(ValueError):
    """Base class for every failure raised while parsing a formula."""


class InvalidInputType(FormulaError, TypeError):
    """The formula passed in is not a string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Formula must be a string, not {type(value).__name__}")


class UnknownElementSymbol(FormulaError):
    def __init__(self, symbol: str, segment: Optional[str] = None):
        self.symbol = symbol
        self.segment = segment
        if segment is None:
            message = f"Unknown element symbol '{symbol}'"
        else:
            message = f"Unknown element symbol '{symbol}' in '{segment}'"
        super().__init__(message)


class UnmatchedClosingBracket(FormulaError):
    def __init__(self, position: int, segment: str):
        self.position = position
        self.segment = segment
        super().__init__(
            f"Unmatched closing bracket at position {position} in '{segment}'"
        )


class UnmatchedOpeningBracket(FormulaError):
    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(f"Unmatched opening bracket in '{segment}'")


class InvalidCharacter(FormulaError):
    def __init__(self, character: str, position: int, segment: str):
        self.character = character
        self.position = position
        self.segment = segment
        super().__init__(
            f"Invalid character '{character}' at position {position} in '{segment}'"
        )


class NestingTooDeep(FormulaError):
    """Brackets are nested deeper than the parser accepts."""

    def __init__(self, position: int, segment: str, max_depth: int):
        self.position = position
        self.segment = segment
        self.max_depth = max_depth
        super().__init__(
            f"Bracket nesting exceeds {max_depth} levels at position {position} in '{segment}'"
        )


class InvalidCharge(FormulaError):
    def __init__(self, annotation: str, reason: str):
        self.annotation = annotation
        shown = annotation if len(annotation) <= 20 else annotation[:20] + "..."
        super().__init__(f"Invalid charge annotation '{shown}': {reason}")


class InvalidQuantity(FormulaError):
    """A number in the formula is not a finite quantity."""

    def __init__(self, literal: str, position: Optional[int] = None):
        self.literal = literal
        self.position = position
        if position is None:
            message = f"Quantity {literal} is not finite"
        else:
            message = f"Quantity '{literal}' at position {position} is not finite"
        super().__init__(message)
