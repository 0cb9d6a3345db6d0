"""Binary uploads.

Uploads go to the upload host; the returned ``Upload`` can be linked from an
asset file's ``uploadFrom`` before processing the asset.
"""

from typing import BinaryIO

from ..models.resources import Upload
from .base import BaseService, Result


class UploadsService(BaseService):
    def create(self, space_id: str, data: bytes | BinaryIO) -> Result[Upload]:
        """Upload raw bytes or the contents of a binary file object.

        Args:
            space_id: Space ID
            data: File contents

        Returns:
            Upload reference
        """
        content = data if isinstance(data, bytes) else data.read()
        request = self._client.build_request(
            "POST",
            self._space_path(space_id, "uploads"),
            content=content,
            headers={"Content-Type": "application/octet-stream"},
        )
        return self._client.execute(request, Upload)
