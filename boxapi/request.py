import json

import requests
from requests.auth import AuthBase
from urllib.parse import quote, urlencode


def format_command(template, *args):
    """Substitute path arguments into a command template.

    Each argument is escaped as a single path segment, so a '/' in an
    identifier cannot change the endpoint.

    >>> format_command('files/%s/copy', 'a/b c')
    'files/a%2Fb%20c/copy'
    """
    return template % tuple(quote(str(arg), safe='') for arg in args)


class BearerAuth(AuthBase):
    def __init__(self, token):
        self.token = token

    def __call__(self, r):
        r.headers['Authorization'] = 'Bearer %s' % self.token
        return r


class BoxRestRequest(object):

    AUTH_PREFIX = "https://app.box.com/api"
    API_PREFIX = "https://api.box.com/2.0"
    API_UPLOAD_PREFIX = "https://upload.box.com/api/2.0"

    def __init__(self, client_id=None, client_secret=None,
                    api_url=None, upload_url=None, auth_url=None):
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = None

        self.api_url = api_url or BoxRestRequest.API_PREFIX
        self.upload_url = upload_url or BoxRestRequest.API_UPLOAD_PREFIX
        self.auth_url = auth_url or BoxRestRequest.AUTH_PREFIX

        self.requests_func = {  "GET": requests.get,
                                "POST": requests.post,
                                "PUT": requests.put,
                                "DELETE": requests.delete, }

    def get_authorization_url(self, redirect_uri=None):
        params = [('response_type', 'code'),
                  ('client_id', self.client_id),
                  ('state', 'authenticated')]

        if redirect_uri:
            params.append(('redirect_uri', redirect_uri))

        return '%s/oauth2/authorize?%s' % (self.auth_url, urlencode(params))

    def get_access_token(self, authorization_code, redirect_uri=None):
        url = '%s/oauth2/token' % self.auth_url
        params = { 'grant_type': 'authorization_code',
                    'code': authorization_code,
                    'client_id': self.client_id,
                    'client_secret': self.client_secret }
        if redirect_uri:
            params['redirect_uri'] = redirect_uri
        return requests.post(url, data=params)

    def build_url(self, command, upload=False):
        if upload:
            url_prefix = self.upload_url
        else:
            url_prefix = self.api_url

        return '%s/%s' % (url_prefix, command)

    def request(self, method, command, data=None, querystring=None,
                    files=None, headers=None, stream=None, json_data=True,
                    upload=False):
        url = self.build_url(command, upload=upload or files is not None)

        if headers is None:
            headers = {}

        if json_data and data is not None:
            data = json.dumps(data)
            headers['Content-Type'] = 'application/json'

        kwargs = { 'headers' : headers,
                   'auth': BearerAuth(self.access_token) }
        if data is not None: kwargs['data'] = data
        if querystring is not None: kwargs['params'] = querystring
        if files is not None: kwargs['files'] = files
        if stream is not None: kwargs['stream'] = stream

        return self.requests_func[method](url, **kwargs)
