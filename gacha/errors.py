class GachaError(Exception):
    """Base class for every error raised by the draw engine."""


class EmptyCatalog(GachaError):
    def __init__(self, message: str = "Nothing to draw"):
        super().__init__(message)


class NotFound(GachaError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'"{name}" is not in the catalog')


class InvariantViolation(GachaError):
    """A non-empty tier whose weights do not add up to a positive total."""


class ParseError(GachaError):
    """The persisted snapshot could not be decoded into a catalog."""


class InvalidEntry(GachaError, ValueError):
    pass
