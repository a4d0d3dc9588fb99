"""Domain enumerations.

Ordering enumerations carry an explicit integer rank: lower rank must
appear earlier. UNKNOWN ranks -1 so nothing is ever ordered before it.
"""

from enum import Enum, auto


class VisibilityScope(Enum):
    """Declared visibility of a member, in required order."""

    UNKNOWN = -1
    PUBLIC = 1
    PROTECTED = 2
    INTERNAL = 3
    PRIVATE = 4

    @property
    def rank(self) -> int:
        """Position in the required ordering."""
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostic messages."""
        return self.name.capitalize()

    def precedes(self, other: "VisibilityScope") -> bool:
        """True if self must appear strictly before other.

        UNKNOWN never takes part in an ordering comparison.
        """
        if self is VisibilityScope.UNKNOWN or other is VisibilityScope.UNKNOWN:
            return False
        return self.rank < other.rank


class MemberKind(Enum):
    """Syntactic category of a member, in required order."""

    UNKNOWN = -1
    FIELD = 1
    EVENT = 2
    CONSTRUCTOR = 3
    PROPERTY = 4
    METHOD = 5

    @property
    def rank(self) -> int:
        """Position in the required ordering."""
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostic messages."""
        return self.name.capitalize()

    def precedes(self, other: "MemberKind") -> bool:
        """True if self must appear strictly before other.

        UNKNOWN never takes part in an ordering comparison.
        """
        if self is MemberKind.UNKNOWN or other is MemberKind.UNKNOWN:
            return False
        return self.rank < other.rank


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # fails the run
    WARNING = auto()  # reported, default for all rules
    INFO = auto()  # informational

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Parse severity from case-insensitive name.

        Raises:
            ValueError: If name is not a severity
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"unknown severity '{name}', expected one of: {choices}") from None


class RuleCategory(Enum):
    """Diagnostic category tag."""

    ORDERING = "Ordering"
    STYLE = "Style"


class NodeKind(Enum):
    """Syntax node shapes the rules know about."""

    TYPE_DECLARATION = auto()
    FIELD = auto()
    PROPERTY = auto()
    METHOD = auto()
    EVENT = auto()
    CONSTRUCTOR = auto()
    INVOCATION = auto()
    OTHER = auto()


class Modifier(Enum):
    """Declaration modifiers exposed by the host tree."""

    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PRIVATE = "private"
    STATIC = "static"
    ABSTRACT = "abstract"
    READONLY = "readonly"
