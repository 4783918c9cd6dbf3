class PostError(Exception):
    """Base class for post loading failures."""

    pass


class InvalidPostError(PostError):
    """Raised when a post file's front matter does not describe a valid post."""

    def __init__(self, filename: str, reason: str = "has bad meta data!"):
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename} {reason}")
