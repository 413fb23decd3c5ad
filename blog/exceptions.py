"""
Domain errors raised by the persistence and session layers.

Each error carries the ``code`` shown to the browser in the ``?error=``
query string of the redirect that reports it.
"""


class BlogError(Exception):
    code = "Internal Server Error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)


class UserAlreadyExists(BlogError):
    code = "Already Registered"


class UserNotFound(BlogError):
    code = "Not Found"


class InvalidCredentials(BlogError):
    code = "Invalid Password"


class PostNotFound(BlogError):
    code = "Not Found"


class NotPostAuthor(BlogError):
    code = "Forbidden"


class NotAuthenticated(BlogError):
    code = "Login Required"
