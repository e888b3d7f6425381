STATUS_MESSAGES = {
    200: 'Success',
    201: 'Created',
    202: 'Accepted',
    204: 'No Content',
    302: 'Redirect',
    304: 'Not Modified',
    401: 'Unauthorized',
    403: 'Forbidden',
    404: 'Not found',
    405: 'Not allowed',
    409: 'Conflict',
    412: 'Precondition failed',
    429: 'Too many requests',
    500: 'Internal server error',
    503: 'Unavailable',
}

UNKNOWN_ERROR_MESSAGE = 'Unknown error'


class BoxHttpResponseError(Exception):
    pass


class BoxError(Exception):
    """Error response returned by Box.

    Attributes:
        status (int): HTTP status code of the response.

        status_message (str): Message from :data:`STATUS_MESSAGES`, "Unknown error" for other codes.

        code, help_url, message, request_id, error, error_description: Fields of the error body sent by Box, None when absent.
    """
    def __init__(self, status, attributes=None):
        self.status = status
        self.status_message = STATUS_MESSAGES.get(status, UNKNOWN_ERROR_MESSAGE)
        self.code = None
        self.help_url = None
        self.message = None
        self.request_id = None
        self.error = None
        self.error_description = None

        if isinstance(attributes, dict):
            for (key, value) in attributes.items():
                if key in self.__dict__ and key not in ('status', 'status_message'):
                    self.__dict__[key] = value

        msg_err = self.status_message + '. '
        if self.message is not None:
            msg_err += self.message + '. '

        if self.error is not None:
            msg_err += self.error + '. '

        if self.error_description is not None:
            msg_err += self.error_description + '. '

        super(BoxError, self).__init__('%s - %s' % (self.status, msg_err))


class BoxRedirect(BoxError):
    pass

class BoxNotModified(BoxError):
    pass

class BoxUnauthorized(BoxError):
    pass

class BoxForbidden(BoxError):
    pass

class BoxNotFound(BoxError):
    pass

class BoxNotAllowed(BoxError):
    pass

class BoxConflict(BoxError):
    pass

class BoxPreconditionFailed(BoxError):
    pass

class BoxTooManyRequests(BoxError):
    pass

class BoxServerError(BoxError):
    pass

class BoxUnavailable(BoxError):
    pass


STATUS_ERRORS = {
    302: BoxRedirect,
    304: BoxNotModified,
    401: BoxUnauthorized,
    403: BoxForbidden,
    404: BoxNotFound,
    405: BoxNotAllowed,
    409: BoxConflict,
    412: BoxPreconditionFailed,
    429: BoxTooManyRequests,
    500: BoxServerError,
    503: BoxUnavailable,
}


def status_to_error(status, attributes=None):
    """Build the error matching an HTTP status code.

    Codes missing from :data:`STATUS_ERRORS` give a plain :class:`BoxError`.
    """
    error_class = STATUS_ERRORS.get(status, BoxError)
    return error_class(status, attributes)
