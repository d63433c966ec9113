class InvalidInput(ValueError):
    """
    Raised when a renderer is called with arguments of the wrong shape,
    such as a countries argument that is not a sequence.
    Malformed country codes never raise and instead produce empty strings.
    """
