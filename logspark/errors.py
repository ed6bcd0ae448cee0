class ChangelogError(Exception):
    """Base class for failures of a changelog generation call"""


class ConfigurationError(ChangelogError):
    """Required credential is missing, no request was attempted"""


class TransportError(ChangelogError):
    """The generation service could not be reached or rejected the request"""


class EmptyResponseError(ChangelogError):
    """The generation service answered without any text"""


class ParseError(ChangelogError):
    """The response text is not a JSON object"""
