"""Request dependencies resolved from objects attached to app.state at startup"""

from fastapi import Request

from pagesmith.auth.gate import AdminGate
from pagesmith.auth.tokens import SessionCodec
from pagesmith.config import AuthConfig, Settings
from pagesmith.crud.blobs import BlobStore
from pagesmith.signaling import SignalingRooms


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_config(request: Request) -> AuthConfig:
    return request.app.state.auth_config


def get_codec(request: Request) -> SessionCodec:
    return request.app.state.codec


def get_gate(request: Request) -> AdminGate:
    return request.app.state.gate


def get_pages_store(request: Request) -> BlobStore:
    return request.app.state.pages_store


def get_leads_store(request: Request) -> BlobStore:
    return request.app.state.leads_store


def get_rooms(request: Request) -> SignalingRooms:
    return request.app.state.rooms
