"""Log level definitions and their canonical string form."""

from enum import Enum


class LogLevel(Enum):
    """Severity of a logged message.

    The value of each member is its canonical rendering, which is what
    appears between the brackets of a log line.
    """

    INFO = "INFO"
    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_level_string(self) -> str:
        """Return the canonical uppercase name of the level."""
        return self.value

    @property
    def method_name(self) -> str:
        """Name of the structlog logger method used to emit this level."""
        return self.value.lower()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Look up a level by name, ignoring case.

        Args:
            name: Level name such as "INFO" or structlog's "info"

        Returns:
            Matching LogLevel member

        Raises:
            ValueError: If the name is not a known level
        """
        try:
            return cls(name.upper())
        except ValueError:
            msg = (
                f"Invalid logging level: {name!r}. "
                f"Must be one of: {', '.join(level.value for level in cls)}"
            )
            raise ValueError(msg) from None

    def __str__(self) -> str:
        return self.to_level_string()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_level_string(), format_spec)
