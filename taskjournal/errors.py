class JournalError(Exception):
    """Base class for journal errors that are not plain I/O failures."""


class JournalDecodeError(JournalError, ValueError):
    """The journal file is not empty but does not hold a valid task list."""


class InvalidPositionError(JournalError, ValueError):
    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        super().__init__(f"Invalid task position: {position} (journal has {size} entries)")


class JournalEncodeError(JournalError, ValueError):
    """The tasks cannot be written as UTF-8; the journal file is left untouched."""
