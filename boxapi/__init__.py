__title__ = 'boxapi'
__version__ = '1.0.0'
__build__ = 0x000001
__author__ = 'boxapi contributors'
__license__ = 'MIT License'
__copyright__ = 'Copyright 2026 boxapi contributors'


from .auth import BoxAuthenticateFlow
from .session import BoxSession
from .request import BoxRestRequest, format_command
from .models import (Entity, Collection, Permission, BoxLock, SharedObject,
                     UploadEmail, File, Folder)
from .exceptions import (BoxError, BoxHttpResponseError, status_to_error,
                         BoxRedirect, BoxNotModified, BoxUnauthorized,
                         BoxForbidden, BoxNotFound, BoxNotAllowed, BoxConflict,
                         BoxPreconditionFailed, BoxTooManyRequests,
                         BoxServerError, BoxUnavailable)
