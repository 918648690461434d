"""User-visible failure notifications."""

from .api_server import send_error


def show_failure(title: str, message: str) -> None:
    """
    Report a failure to the user.

    Printed to the console and forwarded to the launcher UI as an error result.

    Args:
        title: Short description of what failed
        message: Error details
    """
    text = f"{title}: {message}" if message else title
    print(f"✗ {text}")
    send_error(text)
