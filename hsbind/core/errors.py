"""
Signature parsing errors
"""


class SignatureError(ValueError):
    """Base class for every signature notation failure"""


class MissingSig(SignatureError):
    """No `::` separator: a Haskell type signature must be provided"""

    def __init__(self):
        super().__init__(
            "you should provide the targeted Haskell type signature: "
            "`NAME :: TYPE`"
        )


class MalformedSig(SignatureError):
    """The separator is present but the signature shape is invalid"""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"given Haskell function definition is `{text}` but should have "
            f"the form: `NAME :: TYPE`"
        )


class HsType(SignatureError):
    """A type token was rejected by the type-token parser"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Haskell type error: {message}")
