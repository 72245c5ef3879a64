class IdeaGeneratorError(Exception):
    """Base class for errors the idea request handler maps to a status code."""
    status_code = 500


class InputValidationError(IdeaGeneratorError):
    """Raised when formId or responseId is missing from the request body."""
    status_code = 400


class SurveyResponseNotFoundError(IdeaGeneratorError):
    """Raised when Typeform returns no response matching the requested ID."""
    status_code = 404
