"""User-facing text for failed requests, shared with the page script."""

STATUS_MESSAGES = {
    400: "Invalid input. Please check all fields.",
    404: "No notices found.",
    405: "Invalid request method.",
    500: "Server error. Please try again later.",
}

UNEXPECTED_STATUS = "Unexpected error ({status})."

TRANSPORT_FAILURE = "Cannot reach the server. Check your connection."

MISSING_FIELDS = "Please fill all fields before submitting."


def describe_status(status):
    return STATUS_MESSAGES.get(status, UNEXPECTED_STATUS.format(status=status))


def client_messages():
    """Everything the page script needs to turn a failure into text."""
    return {
        'statuses': {str(code): text for code, text in STATUS_MESSAGES.items()},
        'unexpected': UNEXPECTED_STATUS,
        'transport': TRANSPORT_FAILURE,
        'missingFields': MISSING_FIELDS,
    }
