"""Exceptions raised locally, before a request reaches DynamoDB."""


class EasyDynamodbException(Exception):
    pass


class MissingParameterException(EasyDynamodbException):
    """Raised when a required request field is absent from the call parameters."""

    def __init__(self, field: str) -> None:
        article = "an" if field[:1].upper() in "AEIOU" else "a"
        super().__init__(f'Parameters must contain {article} "{field}" object')
        self.field = field
