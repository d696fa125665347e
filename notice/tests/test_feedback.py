from notice.feedback import STATUS_MESSAGES, client_messages, describe_status


def test_known_statuses():
    assert describe_status(400) == "Invalid input. Please check all fields."
    assert describe_status(404) == "No notices found."
    assert describe_status(405) == "Invalid request method."
    assert describe_status(500) == "Server error. Please try again later."


def test_unknown_status_includes_code():
    assert describe_status(418) == "Unexpected error (418)."


def test_client_messages_are_keyed_by_string_status():
    messages = client_messages()

    assert set(messages["statuses"]) == {str(code) for code in STATUS_MESSAGES}
    assert "{status}" in messages["unexpected"]
