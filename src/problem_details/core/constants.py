# This project was developed with assistance from AI tools.
"""Media type and default strings for problem documents."""

PROBLEM_MEDIA_TYPE = "application/problem+json"

SERVER_ERROR_TITLE = "An error occurred while processing your request."
VALIDATION_DETAIL = "One or more validation errors occurred. See the errors property for details."
DEFAULT_FIELD_ERROR = "The input was not valid."


def is_problem_media_type(content_type: str | None) -> bool:
    """Return True when *content_type* names the problem media type.

    Parameters such as ``charset`` are ignored and the comparison is
    case-insensitive.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip()
    return media_type.lower() == PROBLEM_MEDIA_TYPE
