class WrongStreamModeError(Exception):
    """
    Thrown when a command template is read from a stream
    opened in binary mode.
    """

    pass
