"""Progression selection and its valid level/reboot domains."""

from dataclasses import dataclass

from mercdex.errors import MercdexError

DEFAULT_MAX_LEVEL = 31
DEFAULT_MAX_REBOOT = 7


class ProgressionError(MercdexError, ValueError):
    """Raised when a level or reboot falls outside its valid domain."""

    pass


def reboot_range(max_reboot: int = DEFAULT_MAX_REBOOT) -> list[int]:
    """Get the selectable reboot counts, 0 through max_reboot.

    Examples:
        >>> reboot_range(3)
        [0, 1, 2, 3]
    """
    return list(range(0, max_reboot + 1))


def level_range(max_level: int = DEFAULT_MAX_LEVEL) -> list[int]:
    """Get the selectable levels, 1 through max_level.

    Examples:
        >>> level_range(3)
        [1, 2, 3]
    """
    return list(range(1, max_level + 1))


@dataclass(frozen=True)
class ProgressionSelection:
    """A chosen point on both progression axes.

    Level is 1-based, reboot is 0-based. Upper bounds come from configuration
    and are checked by bounded().
    """

    level: int = 1
    reboot: int = 0

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ProgressionError(f"Level must be >= 1, got {self.level}")
        if self.reboot < 0:
            raise ProgressionError(f"Reboot must be >= 0, got {self.reboot}")

    @classmethod
    def bounded(
        cls,
        level: int,
        reboot: int,
        max_level: int = DEFAULT_MAX_LEVEL,
        max_reboot: int = DEFAULT_MAX_REBOOT,
    ) -> "ProgressionSelection":
        """Create a selection, rejecting values past the configured maxima.

        Raises:
            ProgressionError: If level is outside 1..max_level or reboot
                outside 0..max_reboot
        """
        if level > max_level:
            raise ProgressionError(f"Level must be <= {max_level}, got {level}")
        if reboot > max_reboot:
            raise ProgressionError(f"Reboot must be <= {max_reboot}, got {reboot}")
        return cls(level=level, reboot=reboot)
