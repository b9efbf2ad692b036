"""Selection of sinks by name."""


class Matcher:
    """Matches sink names; this base matcher accepts every name.

    Subclasses implement specific pattern kinds and report whether their
    pattern was valid.
    """

    def __call__(self, text: str) -> bool:
        """Return True if ``text`` is a sink name this matcher accepts.

        The base matcher accepts any name that is a string.
        """
        return isinstance(text, str)

    def valid(self) -> bool:
        """Return True if the matcher's pattern is usable."""
        return True

    def error_reason(self) -> str:
        """Return why the pattern is invalid, or an empty string."""
        return ""