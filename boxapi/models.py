import os

from marshmallow import Schema, fields, post_dump, post_load, EXCLUDE

from .exceptions import BoxHttpResponseError
from .request import format_command


class BoxObject(object):
    """Base of every Box resource.

    Attributes mirror the JSON keys of the resource and default to None.
    Only attributes given to the constructor are stored on the instance,
    so loading a partial response keeps what was known before.

    Objects compare equal when their JSON dumps are equal. They are
    mutable, so they are not hashable (__hash__ is None).
    """
    schema = None

    def __init__(self, **kwargs):
        for (key, value) in kwargs.items():
            setattr(self, key, value)

    def __repr__(self):
        return '<%s(id=%s name=%s)>' % (self.__class__.__name__,
                                         getattr(self, 'id', None),
                                         getattr(self, 'name', None))

    def __eq__(self, other):
        return type(self) is type(other) and self.dump() == other.dump()

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @classmethod
    def from_json(cls, result):
        return cls.schema().load(result)

    def load(self, result):
        """Populate the object from a JSON response of Box."""
        loaded = self.schema().load(result)
        self.__dict__.update(loaded.__dict__)
        return self

    def dump(self):
        return self.schema().dump(self)


class BoxSchema(Schema):
    model = None

    class Meta:
        unknown = EXCLUDE

    @post_load
    def make_object(self, data, **kwargs):
        return self.model(**data)

    @post_dump
    def remove_empty(self, data, **kwargs):
        return {k: v for k, v in data.items() if v is not None}


def _str():
    return fields.Str(allow_none=True)

def _int():
    return fields.Int(allow_none=True)

def _bool():
    return fields.Bool(allow_none=True)

def _time():
    return fields.DateTime(format='iso', allow_none=True)

def _nested(schema):
    return fields.Nested(schema, allow_none=True)


class Entity(BoxObject):
    """Mini file, mini folder or mini user."""
    type = None
    id = None
    sequence_id = None
    etag = None
    name = None

    def is_folder(self):
        return self.type == 'folder'

    def is_file(self):
        return self.type == 'file'


class EntitySchema(BoxSchema):
    model = Entity

    type = _str()
    id = _str()
    sequence_id = _str()
    etag = _str()
    name = _str()


class Permission(BoxObject):
    can_download = None
    can_preview = None
    can_upload = None
    can_comment = None
    can_rename = None
    can_delete = None
    can_share = None
    can_set_share_access = None


class PermissionSchema(BoxSchema):
    model = Permission

    can_download = _bool()
    can_preview = _bool()
    can_upload = _bool()
    can_comment = _bool()
    can_rename = _bool()
    can_delete = _bool()
    can_share = _bool()
    can_set_share_access = _bool()


class Collection(BoxObject):
    total_count = None
    entries = None
    offset = None
    limit = None


class CollectionSchema(BoxSchema):
    model = Collection

    total_count = _int()
    entries = fields.List(fields.Nested(EntitySchema), allow_none=True)
    offset = _int()
    limit = _int()


class BoxLock(BoxObject):
    id = None
    created_by = None
    created_at = None
    expires_at = None
    is_download_prevented = None


class BoxLockSchema(BoxSchema):
    model = BoxLock

    id = _str()
    created_by = _nested(EntitySchema)
    created_at = _time()
    expires_at = _time()
    is_download_prevented = _bool()


class SharedObject(BoxObject):
    """Shared link of a file or a folder."""
    url = None
    download_url = None
    vanity_url = None
    is_password_enabled = None
    unshared_at = None
    download_count = None
    preview_count = None
    access = None
    permissions = None


class SharedObjectSchema(BoxSchema):
    model = SharedObject

    url = _str()
    download_url = _str()
    vanity_url = _str()
    is_password_enabled = _bool()
    unshared_at = _time()
    download_count = _int()
    preview_count = _int()
    access = _str()
    permissions = _nested(PermissionSchema)


class UploadEmail(BoxObject):
    access = None
    email = None


class UploadEmailSchema(BoxSchema):
    model = UploadEmail

    access = _str()
    email = _str()


class ItemSchema(BoxSchema):
    """Attributes shared by files and folders."""
    type = _str()
    id = _str()
    sequence_id = _str()
    etag = _str()
    name = _str()
    description = _str()
    size = _int()
    path_collection = _nested(CollectionSchema)
    created_at = _time()
    modified_at = _time()
    trashed_at = _time()
    purged_at = _time()
    content_created_at = _time()
    content_modified_at = _time()
    created_by = _nested(EntitySchema)
    modified_by = _nested(EntitySchema)
    owned_by = _nested(EntitySchema)
    shared_link = _nested(SharedObjectSchema)
    parent = _nested(EntitySchema)
    item_status = _str()
    permissions = _nested(PermissionSchema)
    tags = fields.List(fields.Str(), allow_none=True)


class Item(BoxObject):
    """File or folder stored on Box.

    Every method sends a single request through the :class:`BoxSession`
    given as first argument.
    """
    endpoint = None

    type = None
    id = None
    sequence_id = None
    etag = None
    name = None
    description = None
    size = None
    path_collection = None
    created_at = None
    modified_at = None
    trashed_at = None
    purged_at = None
    content_created_at = None
    content_modified_at = None
    created_by = None
    modified_by = None
    owned_by = None
    shared_link = None
    parent = None
    item_status = None
    permissions = None
    tags = None

    def _check_id(self, operation, parent=None):
        if not self.id:
            raise ValueError('Empty id while using %s' % operation)
        if parent is not None and not parent.id:
            raise ValueError('Empty parent id while using %s' % operation)

    def _command(self, suffix=''):
        return format_command(self.endpoint + '/%s' + suffix, self.id)

    def _update(self, box, operation, data):
        self._check_id(operation)
        return self.load(box.request("PUT", self._command(), data=data))

    def get(self, box):
        """Populate the object from Box. Only the ID is required.

        Returns:
            The object itself.

        Raises:
            ValueError: The ID is empty.

            BoxError: An error response is returned from Box.

            BoxHttpResponseError: Response from Box is malformed.

            requests.exceptions.*: Any connection related problem.
        """
        self._check_id('get')
        return self.load(box.request("GET", self._command()))

    def rename(self, box, name):
        """Rename the object. It is populated with the response of Box."""
        return self._update(box, 'rename', {"name": name})

    def move(self, box, parent):
        """Move the object into the folder parent.

        Only the IDs of the object and of the parent are required. The
        object is populated with the response of Box.
        """
        self._check_id('move', parent)
        return self._update(box, 'move', {"parent": {"id": parent.id}})

    def copy(self, box, parent, name=None):
        """Copy the object into the folder parent.

        Args:
            box (BoxSession): Session used for the request.

            parent (Folder): Destination folder, only its ID is required.

            name (str): Name of the copy. Same name as the original if None.

        Returns:
            The copied object.
        """
        self._check_id('copy', parent)
        data = {"parent": {"id": parent.id}}
        if name is not None:
            data["name"] = name
        return self.from_json(box.request("POST", self._command('/copy'),
                                          data=data))

    def share(self, box, access=None, unshared_at=None,
                can_download=None, can_preview=None, password=None):
        """Create or update the shared link of the object.

        Args:
            box (BoxSession): Session used for the request.

            access (str): "open", "company" or "collaborators". Default access of the enterprise if None.

            unshared_at (datetime): When the link expires.

            can_download (bool): Allow downloads through the link.

            can_preview (bool): Allow previews through the link.

            password (str): Password protecting the link.

        Returns:
            The object itself, the link is in :attr:`shared_link`.
        """
        shared_link = SharedObject(access=access, unshared_at=unshared_at)
        if can_download is not None or can_preview is not None:
            shared_link.permissions = Permission(can_download=can_download,
                                                 can_preview=can_preview)

        data = {"shared_link": shared_link.dump()}
        if password is not None:
            data["shared_link"]["password"] = password

        return self._update(box, 'share', data)

    def unshare(self, box):
        """Remove the shared link of the object."""
        return self._update(box, 'unshare', {"shared_link": None})


class File(Item):
    """File stored on Box.

    Usage:
        >>> f = File(name='report.pdf')
        >>> f.upload_file(box, '/tmp/report.pdf', box.folder('0'))
        >>> f.rename(box, 'report-2014.pdf')
        >>> f.download_file(box, '/tmp/copy.pdf')

    """
    endpoint = 'files'

    sha1 = None
    version_number = None
    comment_count = None
    lock = None
    extension = None

    def delete(self, box):
        """Delete the file. Only the ID is required."""
        self._check_id('delete')
        box.request("DELETE", self._command())

    def download(self, box, writer, chunk_size=1024*1024*1):
        """Download the content of the file into writer.

        Args:
            box (BoxSession): Session used for the request.

            writer: Binary file-like object.

            chunk_size (int): Size of chunks read from the response.

        Returns:
            int. Number of bytes written.
        """
        self._check_id('download')
        resp = box.request("GET", self._command('/content'), stream=True)
        transferred = 0
        try:
            for chunk in resp.iter_content(chunk_size=chunk_size):
                if chunk: # filter out keep-alive new chunks
                    writer.write(chunk)
                    transferred += len(chunk)
        finally:
            resp.close()
        return transferred

    def download_file(self, box, path):
        """Download the file at the local path.

        An existing file is truncated before the request is sent, so it is
        left empty or partial if the download fails.
        """
        with open(path, 'wb') as fp:
            return self.download(box, fp)

    def upload(self, box, reader, parent):
        """Upload the content of reader as a new file in the folder parent.

        The name of the file on Box is :attr:`name`. The object is populated
        with the uploaded file.

        Raises:
            ValueError: The name or the ID of the parent is empty.

            BoxError: An error response is returned from Box (409 if the name already exists).

            BoxHttpResponseError: Response from Box is malformed.
        """
        if not self.name:
            raise ValueError('Empty name while using upload')
        if not parent.id:
            raise ValueError('Empty parent id while using upload')

        resp = box.request("POST", "files/content",
                           files={'filename': (self.name, reader)},
                           data={'parent_id': parent.id},
                           upload=True,
                           json_data=False)

        entries = resp.get('entries') if isinstance(resp, dict) else None
        if not entries or len(entries) != 1:
            raise BoxHttpResponseError('Expected one uploaded entry, got %r' % (entries,))
        return self.load(entries[0])

    def upload_file(self, box, path, parent):
        """Upload a local file. :attr:`name` defaults to the base name of path."""
        if not self.name:
            self.name = os.path.basename(path)
        with open(path, 'rb') as file_obj:
            return self.upload(box, file_obj, parent)


class FileSchema(ItemSchema):
    model = File

    sha1 = _str()
    version_number = _str()
    comment_count = _int()
    lock = _nested(BoxLockSchema)
    extension = _str()


class Folder(Item):
    """Folder stored on Box. The root folder has the ID "0"."""
    endpoint = 'folders'

    has_collaborations = None
    sync_status = None
    item_collection = None
    folder_upload_email = None

    def items(self, box):
        """Files and folders inside the folder, as :class:`Entity` list.

        The folder is requested to Box if not populated yet.
        """
        if self.item_collection is None:
            self.get(box)
        if self.item_collection is None:
            return []
        return self.item_collection.entries or []

    def create(self, box, name):
        """Create a sub folder. Only the ID is required.

        Returns:
            Folder. The created folder.

        Raises:
            BoxConflict: A folder with the same name already exists.
        """
        self._check_id('create')
        resp = box.request("POST", "folders",
                           data={"name": name, "parent": {"id": self.id}})
        return Folder.from_json(resp)

    def delete(self, box, recursive=True):
        """Delete the folder.

        Args:
            recursive (bool): Delete the content too. Box refuses to delete a non-empty folder if False.
        """
        self._check_id('delete')
        box.request("DELETE", self._command(),
                    querystring={'recursive': str(recursive).lower()})


class FolderSchema(ItemSchema):
    model = Folder

    has_collaborations = _bool()
    sync_status = _str()
    item_collection = _nested(CollectionSchema)
    folder_upload_email = _nested(UploadEmailSchema)


for _model, _schema in ((Entity, EntitySchema),
                        (Permission, PermissionSchema),
                        (Collection, CollectionSchema),
                        (BoxLock, BoxLockSchema),
                        (SharedObject, SharedObjectSchema),
                        (UploadEmail, UploadEmailSchema),
                        (File, FileSchema),
                        (Folder, FolderSchema)):
    _model.schema = _schema
