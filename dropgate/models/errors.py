from flask import abort, jsonify


class DropgateError(Exception):
    pass


class FileSizeError(DropgateError):
    def __init__(self, message: str, limit: int):
        super().__init__(message)
        self.limit = limit


class UnsupportedFileType(DropgateError):
    pass


class NotValidRequest(DropgateError):  # Error 422
    pass


def failure_response(status_code: int, error_msg: str):
    data = {
        'status': 'failed',
        'msg': error_msg,
    }
    response = jsonify(data)
    response.status_code = status_code
    return response


def fail(status_code: int, error_msg: str):
    return abort(failure_response(status_code, error_msg))
