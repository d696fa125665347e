import logging

from django.db import Error as DBError
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_safe
from pydantic import ValidationError

from notice.feedback import client_messages
from notice.models import SUGGESTED_CATEGORIES, Notice
from notice.schemas import NoticeIn
from webnotice.utils import json_error

logger = logging.getLogger(__name__)


@require_safe
def home(request):
    context = {
        'categories': SUGGESTED_CATEGORIES,
        'feedback': client_messages(),
    }
    return render(request, 'notice/index.html', context)


# JSON API with no session or cookie auth; any HTTP client may post.
@csrf_exempt
@require_http_methods(['GET', 'HEAD', 'POST'])
def notices(request):
    if request.method == 'POST':
        return create(request)
    return list_notices(request)


def list_notices(request):
    try:
        payload = [notice.to_dict() for notice in Notice.objects.all()]
    except DBError:
        logger.exception("GET /api/notices failed")
        return json_error("Failed to fetch notices", status=500)
    return JsonResponse(payload, safe=False)


def create(request):
    try:
        data = NoticeIn.model_validate_json(request.body)
    except ValidationError:
        return json_error("Missing fields", status=400)

    try:
        notice = Notice.objects.create(
            title=data.title,
            category=data.category,
            date=data.date,
        )
    except DBError:
        logger.exception("POST /api/notices failed")
        return json_error("Failed to save notice", status=500)

    logger.info("Created notice %s", notice.pk)
    return JsonResponse(notice.to_dict(), status=201)
