"""
Domain models for the item loader.

Defines the synthetic record written to the target table. Field names follow
Python conventions; aliases carry the attribute names stored in DynamoDB.
"""
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

FILLER_TEXT = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum."
)

SONG_TITLE = "Here's a title"
ALBUM_TITLE = "Here's an album title"


class Record(BaseModel):
    """
    A single synthetic item, built fresh for each write attempt.
    """

    artist: str = Field(..., alias="Artist", min_length=1)
    song_title: str = Field(..., alias="SongTitle", min_length=1)
    album_title: str = Field(..., alias="AlbumTitle", min_length=1)
    payload: str = Field(FILLER_TEXT, alias="DATA", min_length=1)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    def to_item(self) -> Dict[str, str]:
        """Return the attribute mapping sent to the table."""
        return self.model_dump(by_alias=True)


def build_record(seq: str) -> Record:
    # `seq` is whatever the caller substitutes into the artist name; the
    # loader passes a fresh UUID here, not a counter.
    return Record(
        artist=f"Here's a name {seq}",
        song_title=SONG_TITLE,
        album_title=ALBUM_TITLE,
    )


def build_batch_record(uid: str) -> Record:
    """Record shape used by the batch writer: every title carries the id."""
    return Record(
        artist=f"Artist like {uid}",
        song_title=f"SongTitle like {uid}",
        album_title=f"AlbumTitle like {uid}",
    )


__all__ = ["FILLER_TEXT", "Record", "build_batch_record", "build_record"]
