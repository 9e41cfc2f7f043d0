"""Deterministic serialization for licensehdr."""

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

from .config import HeaderConfig
from .versioning import FileChange

logger = logging.getLogger(__name__)


class ChangeSerializer:
    """Handles deterministic JSON serialization of file changes."""

    def __init__(self, config: HeaderConfig):
        """Initialize with configuration."""
        self.config = config

    def serialize_output(
        self,
        changes: List[FileChange],
        updated: Optional[List[str]] = None,
        notes: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Serialize the complete output to a deterministic dictionary.

        Files keep the order in which they were discovered.
        """
        logger.debug(
            "Serializing output",
            extra={"files": len(changes), "updated": len(updated or [])},
        )

        payload: Dict[str, Any] = {
            "provenance": self.config.to_provenance_dict(),
            "files": [change.to_dict() for change in changes],
            "notes": sorted(notes or []),
        }
        if updated is not None:
            payload["updated"] = sorted(updated)

        checksum = self._compute_checksum(payload)
        payload["provenance"]["checksum"] = checksum

        logger.debug("Serialization finished", extra={"checksum": checksum})
        return payload

    def _compute_checksum(self, payload: Dict[str, Any]) -> str:
        """Compute SHA-256 checksum of the payload, excluding any prior checksum."""
        payload_copy = dict(payload)
        payload_copy["provenance"] = {
            key: value
            for key, value in payload["provenance"].items()
            if key != "checksum"
        }
        json_bytes = self._to_deterministic_json_bytes(payload_copy)
        return hashlib.sha256(json_bytes).hexdigest()

    def _to_deterministic_json_bytes(self, obj: Any) -> bytes:
        """Convert object to deterministic JSON bytes."""
        json_str = json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            indent=None,
        )
        return json_str.encode("utf-8", errors="replace")

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        logger.debug("Rendering payload to JSON string")
        json_str = json.dumps(
            payload,
            ensure_ascii=False,
            sort_keys=True,
            indent=2,
        )
        # Lone surrogates from non-UTF-8 paths become \udcXX JSON escapes
        return json_str.encode("utf-8", errors="backslashreplace").decode("utf-8")

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        logger.debug("Creating success envelope")
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
