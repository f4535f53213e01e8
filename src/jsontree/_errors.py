"""Decoding failure type shared by every production."""

type Position = int


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Carries the production that was attempting to match, the offending
    position, derived line/column numbers and the unconsumed remainder of
    the document at that position.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        production: str = "json",
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.production = production

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def remainder(self) -> str:
        """Input suffix where recognition stopped."""
        return self.doc[self.pos :]

    def __reduce__(self) -> tuple[type, tuple[str, str, Position, str]]:
        return self.__class__, (self.msg, self.doc, self.pos, self.production)


class _Mismatch(JSONDecodeError):
    """
    Raised when a production's opening marker is absent.

    Nothing was consumed, so the dispatcher may try the next alternative.
    Any other JSONDecodeError means the production committed and failed.
    """
