"""Puzzle definition: the letter hive and its middle letter."""

from dataclasses import dataclass

from beesolver.core.exceptions import ConfigurationError
from beesolver.utils.constants import Constants


@dataclass(frozen=True)
class Puzzle:
    """Letters of a spelling bee hive.

    Attributes:
        letters: Allowed letters (the middle letter included)
        middle: Letter every answer must contain
    """

    letters: frozenset[str]
    middle: str

    def __post_init__(self) -> None:
        if not self.letters:
            raise ConfigurationError("No letters provided")
        if len(self.middle) != 1:
            raise ConfigurationError(
                f"Middle letter must be a single character, got {self.middle!r}"
            )
        if self.middle not in self.letters:
            raise ConfigurationError(
                f"Middle letter {self.middle!r} is not one of the letters "
                f"{self.display_letters()!r}"
            )

    @classmethod
    def from_input(
        cls,
        line: str,
        middle: str | None = None,
        case_mode: str = Constants.CASE_INSENSITIVE,
    ) -> "Puzzle":
        """Build a puzzle from a line of letters.

        The first letter of the line is the middle letter unless `middle` is
        given. Whitespace is ignored. Letters are upper-cased except in
        "exact" case mode.

        Raises:
            ConfigurationError: If no letters are given or the middle letter
                is not one of them
        """
        chars = "".join(line.split())
        if case_mode != Constants.CASE_EXACT:
            chars = chars.upper()
            middle = middle.upper() if middle is not None else None

        if not chars:
            raise ConfigurationError("No letters provided")

        if middle is None:
            middle = chars[0]
        else:
            middle = middle.strip()

        return cls(letters=frozenset(chars), middle=middle)

    def display_letters(self) -> str:
        """Letters as a string, middle letter first."""
        others = sorted(c for c in self.letters if c != self.middle)
        if self.middle in self.letters:
            return self.middle + "".join(others)
        return "".join(others)
