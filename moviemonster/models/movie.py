"""Movie record model.

A :class:`MovieRecord` is the decoded body of one metadata API response.
Only ``poster_path`` is modelled explicitly; everything else the API sends
(``id``, ``title``, ``genres``, ...) rides along as pydantic extras and is
serialized back out unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError

from moviemonster.utils.errors import RecordDecodeError


class MovieRecord(BaseModel):
    """Movie metadata as returned by the metadata API.

    Frozen: a record is never mutated once decoded, so the cached instance
    can be shared between requests.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    # Relative image path, normally with a leading "/" (e.g. "/abc.jpg").
    poster_path: str | None = None

    @classmethod
    def decode(cls, body: bytes | str) -> MovieRecord:
        """Decode a raw metadata body.

        Raises
        ------
        RecordDecodeError
            If *body* is not a JSON object (a bare ``null`` included), or
            ``poster_path`` is not a string or null.
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as exc:
            raise RecordDecodeError(
                message=f"Cannot decode movie record: {exc.error_count()} error(s)",
            ) from exc

    def encode(self) -> str:
        """Serialize to a JSON document including all passthrough fields."""
        return self.model_dump_json()
