# src/groupcompare/errors.py


class GroupCompareError(Exception):
    """Base class for groupcompare errors."""


class ConfigurationError(GroupCompareError, ValueError):
    """Input table or plot configuration cannot be used as requested."""


class UnknownGroupError(ConfigurationError):
    """A group label has no entry in the colour palette."""

    def __init__(self, groups, palette):
        self.groups = list(groups)
        self.palette = dict(palette)
        super().__init__(
            f"Group(s) {self.groups} not found in palette. "
            f"Known groups: {list(self.palette)}"
        )


class EmptyInputWarning(UserWarning):
    """Plot requested for a table with zero records."""
