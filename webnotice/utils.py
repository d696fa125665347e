from django.http import JsonResponse


def json_error(message, status):
    """Return a JSON error body of the form {"error": message}."""
    return JsonResponse({"error": message}, status=status)
