from __future__ import annotations

import logging
from typing import Tuple

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from .schemas import PostCreate, describe_validation_error
from .services.post_store import PostStore
from .services.result import VALIDATION, StoreError, StoreFailure

api_bp = Blueprint('api', __name__)

logger = logging.getLogger(__name__)


def _post_store() -> PostStore:
    return current_app.post_store


def error_response(error: StoreError, status_code: int) -> Tuple[Response, int]:
    return jsonify({'error': error.to_dict()}), status_code


@api_bp.route('/health')
def health() -> Response:
    return jsonify({'status': 'ok', 'store': _post_store().name})


@api_bp.route('/posts', methods=['GET'])
def list_posts():
    """Return every post as a JSON array."""

    result = _post_store().list_posts()
    if isinstance(result, StoreFailure):
        logger.warning(
            'posts.list.failed',
            extra={'error_kind': result.error.kind, 'error_message': result.error.message},
        )
        return error_response(result.error, 500)

    logger.info('posts.list.success', extra={'count': len(result.rows)})
    return jsonify(result.rows)


@api_bp.route('/posts', methods=['POST'])
def create_post():
    """Insert a post and echo the stored row, generated fields included."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        logger.info('posts.create.validation_failed', extra={'reason': 'body_not_object'})
        return error_response(StoreError(VALIDATION, 'Request body must be a JSON object.'), 400)

    try:
        draft = PostCreate.model_validate(payload)
    except ValidationError as exc:
        message = describe_validation_error(exc)
        logger.info('posts.create.validation_failed', extra={'reason': message})
        return error_response(StoreError(VALIDATION, message), 400)

    result = _post_store().create_post(draft.title, draft.content, draft.author)
    if isinstance(result, StoreFailure):
        logger.warning(
            'posts.create.failed',
            extra={'error_kind': result.error.kind, 'error_message': result.error.message},
        )
        return error_response(result.error, 500)

    row = result.rows[0]
    logger.info('posts.create.success', extra={'post_id': row.get('id')})
    return jsonify(row)
