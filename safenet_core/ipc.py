"""
safenet_core.ipc
----------------
Decoding of authorisation responses received from the Authenticator over IPC.

The message envelope is URL-safe base64 (padding optional) of UTF-8 JSON:

    {"ver": 1, "kind": "resp", "req_id": 7,
     "resp": {"type": "auth", "result": {"ok": {...AuthGranted...}}}}
    {"ver": 1, "kind": "resp", "req_id": 7,
     "resp": {"type": "auth", "result": {"err": "AuthDenied"}}}
    {"ver": 1, "kind": "revoked", "app_id": "net.maidsafe.cli"}
    {"ver": 1, "kind": "req", "req_id": 7, "req": {...}}
    {"ver": 1, "kind": "err", "req_id": 7, "error": "..."}

This module only decodes; building envelopes belongs to the Authenticator.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import binascii, json

from .constants import IPC_MSG_VERSION
from .errors import AuthError, InvalidInput
from .logger import get_logger
from .utils import b64d

log = get_logger("SAFE.IPC")

MSG_KINDS = ("req", "resp", "revoked", "err")
RESP_TYPES = ("auth", "containers", "unregistered", "share_mdata")


class IpcDecodeError(ValueError):
    pass


@dataclass
class AppKeys:
    owner_key: str
    enc_key: str = field(repr=False)
    sign_pk: str = ""
    sign_sk: str = field(default="", repr=False)
    enc_pk: str = ""
    enc_sk: str = field(default="", repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppKeys":
        return cls(
            owner_key=data["owner_key"],
            enc_key=data["enc_key"],
            sign_pk=data.get("sign_pk", ""),
            sign_sk=data.get("sign_sk", ""),
            enc_pk=data.get("enc_pk", ""),
            enc_sk=data.get("enc_sk", ""),
        )


@dataclass
class AccessContInfo:
    id: str                     # XorName of the access container, hex
    tag: int
    nonce: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessContInfo":
        return cls(id=data["id"], tag=int(data["tag"]), nonce=data["nonce"])


@dataclass
class AuthGranted:
    """Credential handed to an app once the Authenticator approves it."""
    app_keys: AppKeys
    bootstrap_config: List[str] = field(default_factory=list)
    access_container_info: Optional[AccessContInfo] = None
    access_container_entry: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthGranted":
        info = data.get("access_container_info")
        return cls(
            app_keys=AppKeys.from_dict(data["app_keys"]),
            bootstrap_config=list(data.get("bootstrap_config", [])),
            access_container_info=AccessContInfo.from_dict(info) if info else None,
            access_container_entry=dict(data.get("access_container_entry", {})),
        )


@dataclass
class IpcResp:
    type: str
    ok: Any = None
    err: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.err is None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IpcResp":
        resp_type = data["type"]
        if resp_type not in RESP_TYPES:
            raise IpcDecodeError(f"unknown response type {resp_type!r}")
        result = data["result"]
        if not isinstance(result, dict) or len(result) != 1 or not ({"ok", "err"} & result.keys()):
            raise IpcDecodeError("response result must hold exactly one of 'ok' or 'err'")
        if "err" in result:
            return cls(type=resp_type, err=str(result["err"]))
        ok = result["ok"]
        if resp_type == "auth":
            ok = AuthGranted.from_dict(ok)
        return cls(type=resp_type, ok=ok)


@dataclass
class IpcMsg:
    kind: str
    req_id: Optional[int] = None
    resp: Optional[IpcResp] = None
    req: Optional[Dict[str, Any]] = None
    app_id: Optional[str] = None
    error: Optional[str] = None

    def describe(self) -> str:
        if self.kind == "resp" and self.resp is not None:
            return f"Unexpected IPC response of type '{self.resp.type}' (req_id={self.req_id})"
        if self.kind == "err":
            return f"IPC error message (req_id={self.req_id}): {self.error}"
        return f"Unexpected IPC message of kind '{self.kind}' (req_id={self.req_id})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IpcMsg":
        if not isinstance(data, dict):
            raise IpcDecodeError("message is not a JSON object")
        ver = data.get("ver", IPC_MSG_VERSION)
        if ver != IPC_MSG_VERSION:
            raise IpcDecodeError(f"unsupported message version {ver!r}")
        kind = data.get("kind")
        if kind not in MSG_KINDS:
            raise IpcDecodeError(f"unknown message kind {kind!r}")
        return cls(
            kind=kind,
            req_id=data.get("req_id"),
            resp=IpcResp.from_dict(data["resp"]) if kind == "resp" else None,
            req=data.get("req") if kind == "req" else None,
            app_id=data.get("app_id"),
            error=data.get("error") if kind == "err" else None,
        )


def decode_msg(encoded: str) -> IpcMsg:
    try:
        raw = b64d(encoded)
        data = json.loads(raw.decode("utf-8"))
        return IpcMsg.from_dict(data)
    except IpcDecodeError:
        raise
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise IpcDecodeError(f"malformed envelope: {e}") from e
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise IpcDecodeError(f"malformed message body: {e!r}") from e


def decode_ipc_msg(ipc_msg: str) -> AuthGranted:
    try:
        msg = decode_msg(ipc_msg)
    except IpcDecodeError as e:
        log.warning(f"Rejected IPC message: {e}")
        raise InvalidInput(f"Failed to decode the credentials: {e}") from e

    if msg.kind == "resp" and msg.resp.type == "auth":
        if msg.resp.is_ok:
            log.debug(f"Auth granted for req_id={msg.req_id}")
            return msg.resp.ok
        raise AuthError(msg.resp.err)
    if msg.kind == "revoked":
        raise AuthError("Authorisation denied")
    raise AuthError(msg.describe())
