class VersionerError(Exception):
    """Base class for every error raised by the version resolver."""


class InvalidInput(VersionerError, ValueError):
    pass


class EmptyBranchName(InvalidInput):
    def __init__(self, message: str = "branch name is empty"):
        super().__init__(message)


class MalformedVersionString(VersionerError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"malformed version string: {value!r}")


class MissingVersionFile(VersionerError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"{self.path} not found!")
