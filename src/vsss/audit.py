"""Opt-in audit trail with Ed25519 signatures and hash chaining.

Sharing sessions, rejected shares and failed reconstructions can be recorded
as signed JSON entries. Each entry carries the chain hash of the previous one
so that removing or reordering files is detectable. Entries never contain
secrets, coefficients or share values, only counts and share indices.

Auditing is off unless ``VSSS_AUDIT`` is set (see :mod:`vsss.policy`).
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .policy import load_policy

GENESIS = "GENESIS"


def audit_dir() -> Path:
    """Return the directory where audit artefacts are stored.

    ``VSSS_AUDIT_DIR`` overrides the default ``~/.vsss_audit``.
    """

    override = os.environ.get("VSSS_AUDIT_DIR")
    base = Path(override).expanduser() if override else Path.home() / ".vsss_audit"
    base.mkdir(parents=True, exist_ok=True)
    return base


def is_enabled() -> bool:
    return load_policy().audit_enabled


def _key_path() -> Path:
    return audit_dir() / "signing_key.pem"


def _chain_state_path() -> Path:
    return audit_dir() / "chain.state"


def _load_private_key() -> Ed25519PrivateKey:
    key_path = _key_path()
    if key_path.exists():
        return serialization.load_pem_private_key(key_path.read_bytes(), password=None)
    private_key = Ed25519PrivateKey.generate()
    key_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return private_key


def _load_prev_hash() -> str:
    try:
        return _chain_state_path().read_text().strip()
    except FileNotFoundError:
        return GENESIS


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def record_event(event: str, *, details: Dict[str, Any] | None = None) -> Optional[Path]:
    """Append ``event`` to the chain; returns ``None`` while auditing is off."""

    if not is_enabled():
        return None
    timestamp = int(time.time())
    payload = {
        "event": event,
        "details": details or {},
        "timestamp": timestamp,
        "prev_hash": _load_prev_hash(),
    }
    message = _canonical(payload)
    signature = _load_private_key().sign(message)
    chain_hash = hashlib.sha3_512(message + signature).hexdigest()
    entry = {
        "payload": payload,
        "signature": signature.hex(),
        "chain_hash": chain_hash,
    }
    file_path = audit_dir() / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
    file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
    _chain_state_path().write_text(chain_hash)
    return file_path


def verify_log(path: os.PathLike[str] | str) -> bool:
    data = json.loads(Path(path).read_text())
    payload = _canonical(data["payload"])
    signature = bytes.fromhex(data.get("signature") or "")
    public_key = _load_private_key().public_key()
    try:
        public_key.verify(signature, payload)
    except InvalidSignature:
        return False
    expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
    return expected_chain_hash == data.get("chain_hash")


__all__ = ["audit_dir", "is_enabled", "record_event", "verify_log"]
