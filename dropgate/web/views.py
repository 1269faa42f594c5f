from dataclasses import asdict
import math
from typing import Any, Dict, Optional, Union

from flask import jsonify, request
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import RequestEntityTooLarge

from dropgate.models import upload
from dropgate.models.content import ContentClassifier
from dropgate.models.errors import (
    FileSizeError, NotValidRequest, UnsupportedFileType, fail,
    failure_response,
)
from dropgate.models.sizes import Sizes
from dropgate.utils.log import log
from dropgate.web import routes, webapp


def get_classifier() -> ContentClassifier:
    return ContentClassifier(sizes=Sizes.from_config(webapp.config))


def _get_request_data() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _parse_size(value: Any) -> Union[int, float]:
    if isinstance(value, bool):
        raise NotValidRequest(f'Invalid size: {value!r}')
    if isinstance(value, (int, float)):
        size = value
    else:
        try:
            size = int(value)
        except (TypeError, ValueError):
            raise NotValidRequest(f'Invalid size: {value!r}')
    # Fractional sizes are compared as given, never truncated.
    if not math.isfinite(size) or size < 0:
        raise NotValidRequest(f'Invalid size: {value!r}')
    return size


@webapp.route(f'{routes.CLASSIFY}/<path:filename>', methods=['GET'])
def classify(filename: str):
    return jsonify(asdict(get_classifier().classify(filename)))


@webapp.route(routes.CHECK, methods=['POST'])
def check():
    data = _get_request_data()
    filename = data.get('filename')
    if not isinstance(filename, str) or not filename:
        return fail(422, 'No filename was given.')

    try:
        size = _parse_size(data.get('size'))
    except NotValidRequest as e:
        return fail(422, str(e))

    error = get_classifier().should_reject_file(filename, size)
    if isinstance(error, FileSizeError):
        return fail(413, str(error))
    elif isinstance(error, UnsupportedFileType):
        return fail(415, str(error))
    return jsonify({'status': 'accepted'})


@webapp.route(routes.UPLOAD, methods=['POST'])
def upload_page():
    file: Optional[FileStorage] = request.files.get('file')
    if file is None:
        return fail(422, 'No file was given.')

    try:
        classification = upload.check_upload(file, get_classifier())
    except FileSizeError as e:
        log.debug(e)
        return fail(413, str(e))
    except UnsupportedFileType as e:
        log.debug(e)
        return fail(415, str(e))

    return jsonify(asdict(classification))


@webapp.route(routes.URL, methods=['GET'])
def url_kind():
    url = request.args.get('url', '')
    classifier = get_classifier()
    return jsonify({
        'relative': classifier.is_relative_url(url),
        'blob': classifier.is_blob_url(url),
    })


@webapp.errorhandler(RequestEntityTooLarge)
def request_too_large(e: RequestEntityTooLarge):
    limit = webapp.config['MAX_CONTENT_LENGTH']
    log.debug(f'Request body over {limit} bytes')
    return failure_response(
        413, f'Request is too big. {limit} bytes allowed.',
    )
