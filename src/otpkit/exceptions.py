class InvalidParameter(ValueError):
    """
    Raised when an OTP entry or a code derivation receives a parameter
    outside the range the algorithm is defined for.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__("{}: {}".format(name, message))
        self.name = name
