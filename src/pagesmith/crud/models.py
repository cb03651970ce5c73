"""Database table definition for key/value blobs"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel
from sqlalchemy import Column, DateTime, JSON, String, Text
from sqlmodel import Field, SQLModel


class Blob(SQLModel, table=True):
    """A single value in a named store; (store, key) is unique, last writer wins"""
    __tablename__ = "blobs"
    store: str = Field(primary_key=True, description="Store name, e.g. 'pages' or 'leads'")
    key: str = Field(primary_key=True)
    value: str = Field(..., sa_column=Column(Text, nullable=False))
    etag: str = Field(..., sa_column=Column(String(64), nullable=False))
    meta: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class BlobEntry(BaseModel):
    """Listing record returned by BlobStore.list"""
    key: str
    etag: str
