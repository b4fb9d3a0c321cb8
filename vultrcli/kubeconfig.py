"""Decoding and saving of cluster kubeconfigs, and command argument checks."""

from __future__ import annotations

import base64
import binascii
import os
from pathlib import Path
from typing import Sequence

KUBECONFIG_FILE_PERMISSION = 0o600
KUBECONFIG_DIR_PERMISSION = 0o755


class KubeconfigError(Exception):
    """Raised when a kubeconfig cannot be decoded or written."""


def decode_kubeconfig(encoded: str) -> bytes:
    """Decode a standard, padded base64 kubeconfig; line breaks are ignored."""
    cleaned = encoded.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise KubeconfigError(f"error decoding kubeconfig : {exc}") from exc


def write_kubeconfig(encoded: str, path: str | os.PathLike[str]) -> Path:
    """Decode a kubeconfig and write it to path, creating parent directories."""
    target = Path(path)
    directory = os.path.dirname(os.fspath(target)) or "."
    try:
        os.makedirs(directory, mode=KUBECONFIG_DIR_PERMISSION, exist_ok=True)
    except OSError as exc:
        raise KubeconfigError(f"error creating directory for kubeconfig : {exc}") from exc

    data = decode_kubeconfig(encoded)

    try:
        fd = os.open(
            target,
            os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
            KUBECONFIG_FILE_PERMISSION,
        )
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise KubeconfigError(f"error writing kubeconfig to {path} : {exc}") from exc
    return target


def require_args(args: Sequence[str], count: int, message: str) -> list[str]:
    """Return the arguments, or raise ValueError(message) if fewer than count."""
    if len(args) < count:
        raise ValueError(message)
    return list(args)