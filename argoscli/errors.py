"""Exception type raised throughout the package."""


class ArgosException(RuntimeError):
    """Raised for invalid definitions, invalid command lines and misuse."""