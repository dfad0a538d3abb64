"""
Console formatting helpers for backend responses.
"""


def format_response(response: str) -> str:
    """Add some visual separation between option and summary sections."""
    response = response.replace("Option", "\nOption")
    response = response.replace("Summary", "\n\nSummary")
    return response


def format_comparison(
    attempts: int,
    first_name: str,
    first_content: str,
    second_name: str,
    second_content: str
) -> str:
    """
    Present two disagreeing responses one after the other.

    Args:
        attempts: Number of attempts that were made
        first_name: Display name of the first backend
        first_content: Raw response text from the first backend
        second_name: Display name of the second backend
        second_content: Raw response text from the second backend

    Returns:
        A block listing both formatted responses
    """
    return (
        f"Responses after {attempts} attempts:\n\n"
        f"{first_name} Response:\n{format_response(first_content)}\n\n"
        f"{second_name} Response:\n{format_response(second_content)}"
    )
