import logging

from .request import BoxRestRequest
from .session import BoxSession
from .exceptions import BoxHttpResponseError, status_to_error

logger = logging.getLogger(__name__)


class BoxAuthenticateFlow(object):
    """From the Client ID and Client Secret from Box, get the Access Token and the Refresh Token.

    Usage:
        >>> flow = BoxAuthenticateFlow('my_id', 'my_secret')
        >>> url = flow.get_authorization_url()
        ...
        ...
        >>> access_token, refresh_token = flow.get_access_tokens('generated_auth_code')

    """
    def __init__(self, client_id, client_secret, auth_url=None):
        """Constructor

        Args:
            client_id (str): Client ID provided by Box.

            client_secret (str): Client Secret provided by Box.

            auth_url (str): Base url of the OAuth2 endpoints. Default to :attr:`BoxRestRequest.AUTH_PREFIX`.
        """
        self.box_request = BoxRestRequest(client_id, client_secret,
                                          auth_url=auth_url)
        self.client_id = client_id
        self.client_secret = client_secret

    def get_authorization_url(self, redirect_uri=None):
        """Get the url used to get an authorization code.

        Args:
            redirect_uri (str): Https url where Box will redirect the user with the authorization code in the querystring. If None the value stored in the Box application settings will be used.

        Returns:
            str. Url used to get an authorization code.
        """
        return self.box_request.get_authorization_url(redirect_uri)

    def get_access_tokens(self, authorization_code, redirect_uri=None):
        """From the authorization code, get the "access token" and the "refresh token" from Box.

        Args:
            authorization_code (str). Authorisation code emitted by Box at the url provided by the function :func:`get_authorization_url`.

            redirect_uri (str): Must be the value given to :func:`get_authorization_url`, if any.

        Returns:
            tuple. (access_token, refresh_token)

        Raises:
            BoxError: An error response is returned from Box (status_code is not 2xx).

            BoxHttpResponseError: Response from Box is malformed.

            requests.exceptions.*: Any connection related problem.
        """
        response = self.box_request.get_access_token(authorization_code,
                                                     redirect_uri)
        logger.debug('Token response from box.com: %s', response)

        if not 200 <= response.status_code < 300:
            raise status_to_error(response.status_code,
                                  self.__error_attributes(response))

        try:
            att = response.json()
        except ValueError as ex:
            raise BoxHttpResponseError(ex)

        try:
            return att['access_token'], att.get('refresh_token')
        except (KeyError, TypeError, AttributeError) as ex:
            raise BoxHttpResponseError(ex)

    def __error_attributes(self, response):
        try:
            att = response.json()
        except ValueError:
            return {}
        return att if isinstance(att, dict) else {}

    def authenticate(self, prompt=input):
        """Run the flow interactively and open a session.

        The user is asked to visit the authorization url and to type the code Box gives back.

        Args:
            prompt (func): Function showing a message and returning what the user typed.

        Returns:
            BoxSession. Session using the new Access Token.
        """
        url = self.get_authorization_url()
        code = prompt('Please visit:\n%s\nEnter the code: ' % url)
        access_token, _ = self.get_access_tokens(code.strip())
        return BoxSession(access_token)
