"""
Typed records for TheMovieDB API responses.

Every model shares AbstractJsonMapping: unknown JSON fields are captured
(never rejected) so the client keeps working when TMDb adds fields, and
parsed records are frozen. All fields are optional because TMDb omits
fields freely, and a null collection or flag reads as its empty default.
"""

from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AbstractJsonMapping(BaseModel):
    """Base for all response records."""

    model_config = ConfigDict(extra="allow", frozen=True)

    def unknown_fields(self) -> Dict[str, Any]:
        """Fields present in the JSON but not declared on the model."""
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, Any]:
        """Known fields only, recursively, as JSON-compatible values."""
        return {name: _known_value(getattr(self, name)) for name in type(self).model_fields}


def _known_value(value: Any) -> Any:
    if isinstance(value, AbstractJsonMapping):
        return value.to_dict()
    if isinstance(value, frozenset):
        return sorted(_known_value(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [_known_value(v) for v in value]
    return value


def _null_as_false(cls, value):
    return False if value is None else value


class ImageConfiguration(AbstractJsonMapping):
    """Image base URLs and the sizes TMDb can serve."""

    base_url: Optional[str] = None
    secure_base_url: Optional[str] = None
    backdrop_sizes: Tuple[str, ...] = ()
    logo_sizes: Tuple[str, ...] = ()
    poster_sizes: Tuple[str, ...] = ()
    profile_sizes: Tuple[str, ...] = ()
    still_sizes: Tuple[str, ...] = ()

    @field_validator(
        "backdrop_sizes", "logo_sizes", "poster_sizes", "profile_sizes", "still_sizes", mode="before"
    )
    @classmethod
    def null_sizes_as_empty(cls, value):
        return () if value is None else value

    def is_valid_poster_size(self, size: str) -> bool:
        return bool(size) and size in self.poster_sizes

    def is_valid_backdrop_size(self, size: str) -> bool:
        return bool(size) and size in self.backdrop_sizes

    def is_valid_profile_size(self, size: str) -> bool:
        return bool(size) and size in self.profile_sizes

    def is_valid_logo_size(self, size: str) -> bool:
        return bool(size) and size in self.logo_sizes

    def is_valid_still_size(self, size: str) -> bool:
        return bool(size) and size in self.still_sizes

    def is_valid_size(self, size: str) -> bool:
        """True if the size appears in any of the size lists."""
        return (
            self.is_valid_poster_size(size)
            or self.is_valid_backdrop_size(size)
            or self.is_valid_profile_size(size)
            or self.is_valid_logo_size(size)
            or self.is_valid_still_size(size)
        )


class Configuration(AbstractJsonMapping):
    """Response of the /configuration endpoint."""

    images: ImageConfiguration = Field(default_factory=ImageConfiguration)
    change_keys: FrozenSet[str] = frozenset()

    @field_validator("images", mode="before")
    @classmethod
    def null_images_as_default(cls, value):
        return ImageConfiguration() if value is None else value

    @field_validator("change_keys", mode="before")
    @classmethod
    def null_change_keys_as_empty(cls, value):
        return frozenset() if value is None else value


class TokenAuthorisation(AbstractJsonMapping):
    """Request token issued at the start of the authentication exchange."""

    request_token: Optional[str] = None
    expires_at: Optional[str] = None
    success: bool = False

    null_success_as_false = field_validator("success", mode="before")(_null_as_false)


class TokenSession(AbstractJsonMapping):
    """Session (or guest session) issued for an authorised request token."""

    session_id: Optional[str] = None
    guest_session_id: Optional[str] = None
    expires_at: Optional[str] = None
    success: bool = False
    status_code: Optional[int] = None
    status_message: Optional[str] = None

    null_success_as_false = field_validator("success", mode="before")(_null_as_false)


class MovieBasic(AbstractJsonMapping):
    """Movie entry as it appears inside a list."""

    id: Optional[int] = None
    title: Optional[str] = None
    original_title: Optional[str] = None
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    popularity: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    adult: Optional[bool] = None
    media_type: Optional[str] = None


class MovieDbList(AbstractJsonMapping):
    """A user list and its movie entries."""

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created_by: Optional[str] = None
    favorite_count: Optional[int] = None
    item_count: Optional[int] = None
    iso_639_1: Optional[str] = None
    poster_path: Optional[str] = None
    items: Tuple[MovieBasic, ...] = ()

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, value):
        return () if value is None else value


class ListItemStatus(AbstractJsonMapping):
    """Whether a movie is present on a list."""

    id: Optional[Union[int, str]] = None
    item_present: bool = False

    null_item_present_as_false = field_validator("item_present", mode="before")(_null_as_false)


class StatusCode(AbstractJsonMapping):
    """TMDb's own status indicator embedded in a response body."""

    status_code: Optional[int] = None
    status_message: Optional[str] = None
    success: Optional[bool] = None


class StatusCodeList(StatusCode):
    """Status returned when a list is created."""

    list_id: Optional[Union[int, str]] = None
