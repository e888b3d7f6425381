import logging

from .request import BoxRestRequest
from .exceptions import BoxHttpResponseError, status_to_error
from .models import File, Folder

logger = logging.getLogger(__name__)


class BoxSession(object):
    """Send authenticated requests to Box.

    A session only holds an Access Token (found with :class:`BoxAuthenticateFlow`). It is never refreshed: when it expires every request raises :class:`BoxUnauthorized` and a new token has to be set with the :attr:`access_token` property.

    Files and folders are handled through :class:`File` and :class:`Folder`, whose methods take the session as first argument.

    Usage:
        >>> box = BoxSession(access_token)
        >>> folder = box.folder('0')
        >>> folder.get(box)
        >>> sub_folder = folder.create(box, 'my folder')

    """
    def __init__(self, access_token, api_url=None, upload_url=None):
        """Constructor

        Args:
            access_token (str): Access Token found with the class :class:`BoxAuthenticateFlow`.

            api_url (str): Base url of the API. Default to :attr:`BoxRestRequest.API_PREFIX`.

            upload_url (str): Base url of the upload API. Default to :attr:`BoxRestRequest.API_UPLOAD_PREFIX`.
        """
        self.box_request = BoxRestRequest(api_url=api_url,
                                          upload_url=upload_url)
        self.box_request.access_token = access_token

    @property
    def access_token(self):
        return self.box_request.access_token

    @access_token.setter
    def access_token(self, value):
        self.box_request.access_token = value

    def file(self, file_id):
        """Get a :class:`File` with only its ID set. Nothing is requested to Box."""
        return File(id=str(file_id))

    def folder(self, folder_id):
        """Get a :class:`Folder` with only its ID set. Nothing is requested to Box."""
        return Folder(id=str(folder_id))

    def request(self, method, command, data=None, querystring=None,
                    files=None, stream=False, upload=False, json_data=True):
        """Send a request to Box and check the response.

        Args:
            method (str): "GET", "POST", "PUT" or "DELETE".

            command (str): Path of the endpoint, relative to the API url (see :func:`format_command`).

            data: Body of the request. Encoded as JSON if json_data is True, sent as form fields otherwise.

            querystring (dict): Parameters of the query string.

            files (dict): Files to send as a multipart body. The request is then sent to the upload API.

            stream (bool): Do not read the body, the response is returned as is.

            upload (bool): Send the request to the upload API even without files.

            json_data (bool): Encode data as JSON. Set to False for form fields.

        Returns:
            dict. JSON response from Box ({} if empty), or the ``requests.Response`` if stream is True.

        Raises:
            BoxError: An error response is returned from Box (status_code is not 2xx).

            BoxHttpResponseError: Response from Box is malformed.

            requests.exceptions.*: Any connection related problem.
        """
        resp = self.box_request.request(method, command,
                                        data, querystring,
                                        files, None, stream or None,
                                        json_data, upload)

        self.__log_debug_request(resp)

        return self.__check_response(resp, stream)

    def __check_response(self, response, stream=False):
        if stream:
            logger.debug('Response from box.com: %s. {Streamed content}', response)
        else:
            logger.debug('Response from box.com: %s. %s', response, response.text)

        if not 200 <= response.status_code < 300:
            attributes = self.__error_attributes(response)
            if stream:
                response.close()
            raise status_to_error(response.status_code, attributes)

        if stream:
            return response

        try:
            if response.text is not None and len(response.text) > 0:
                return response.json()
            return {}
        except ValueError as ex:
            raise BoxHttpResponseError(ex)

    def __error_attributes(self, response):
        try:
            att = response.json()
        except ValueError:
            return {}
        return att if isinstance(att, dict) else {}

    def __log_debug_request(self, resp):
        if not logger.isEnabledFor(logging.DEBUG):
            return

        request = resp.request
        headers = dict(request.headers)
        if 'Authorization' in headers:
            headers['Authorization'] = 'Bearer ***'

        body = request.body
        if isinstance(body, bytes):
            content_type = headers.get('Content-Type', '')
            if content_type.startswith('multipart/'):
                body = '{Multipart content, %i bytes}' % len(body)
            else:
                body = body.decode('utf-8', 'replace')

        logger.debug('Request made to box.com: %s %s\nHEADERS:\n%s\nBODY:\n%s',
                     request.method, request.url, headers, body)
