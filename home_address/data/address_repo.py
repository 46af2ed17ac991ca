from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from home_address.data.db import get_connection

logger = logging.getLogger(__name__)


def iso_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def split_street(street: Optional[str]) -> Tuple[str, str]:
    """
    Stored street is "line1\\nline2". Returns (line1, line2); missing parts are "".
    """
    parts = (street or "").split("\n")
    line1 = parts[0] if parts else ""
    line2 = parts[1] if len(parts) > 1 else ""
    return line1, line2


def join_street(line1: Optional[str], line2: Optional[str]) -> str:
    l1 = (line1 or "").strip()
    l2 = (line2 or "").strip()
    if not l2:
        return l1
    return f"{l1}\n{l2}"


def get_address(user_id: str) -> Optional[Dict[str, Any]]:
    uid = (user_id or "").strip()
    if not uid:
        return None

    with get_connection() as conn:
        row = conn.execute(
            """
            SELECT user_id, street, city, state, zip, country, updated_at
            FROM home_address
            WHERE user_id = ?
            """,
            (uid,),
        ).fetchone()

    if not row:
        return None

    return {k: row[k] for k in row.keys()}


def save_address(user_id: str, data: Dict[str, Any]) -> None:
    """
    Upsert the user's home address from form values
    (address_line1, address_line2, city, state, postal_code, country).
    All values are trimmed before storing.
    """
    uid = (user_id or "").strip()
    if not uid:
        raise ValueError("user_id is required")

    now = iso_now()

    payload = {
        "street": join_street(data.get("address_line1"), data.get("address_line2")),
        "city": (data.get("city") or "").strip(),
        "state": (data.get("state") or "").strip(),
        "zip": (data.get("postal_code") or "").strip(),
        "country": (data.get("country") or "").strip(),
    }

    with get_connection() as conn:
        cur = conn.execute(
            """
            UPDATE home_address
            SET
              street = ?,
              city = ?,
              state = ?,
              zip = ?,
              country = ?,
              updated_at = ?
            WHERE user_id = ?
            """,
            (
                payload["street"],
                payload["city"],
                payload["state"],
                payload["zip"],
                payload["country"],
                now,
                uid,
            ),
        )

        if cur.rowcount == 0:
            conn.execute(
                """
                INSERT INTO home_address (
                  user_id,
                  street,
                  city,
                  state,
                  zip,
                  country,
                  updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    uid,
                    payload["street"],
                    payload["city"],
                    payload["state"],
                    payload["zip"],
                    payload["country"],
                    now,
                ),
            )

    logger.info("Saved home address for user %s (country=%s)", uid, payload["country"] or "-")
