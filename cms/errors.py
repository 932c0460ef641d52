class CMSError(Exception):
    """Base class for errors surfaced to the user as a flash message."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(CMSError):
    """Bad input; the form is re-rendered with a 422."""


class InvalidInput(ValidationError):
    pass


class AlreadyTaken(ValidationError):
    pass


class DocumentNotFound(CMSError):
    def __init__(self, name):
        super().__init__(f"{name} does not exist")
        self.name = name
