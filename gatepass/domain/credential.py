"""
Gate Pass Credential

Builds the payload embedded in the QR code issued on approval.
The JSON shape is consumed by gate scanners and must stay stable.
"""

import json
from datetime import datetime, timedelta
from typing import Any, Dict

from .entities.application import Application

CREDENTIAL_TYPE = "GATE_PASS"
SIMPLIFY_THRESHOLD = 500
PURPOSE_PREVIEW_LENGTH = 50


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2025-06-01T10:00:00.000Z"""
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def build_gate_pass_payload(
    application: Application,
    approved_by: str,
    approved_at: datetime,
    company_name: str,
    validity: timedelta = timedelta(hours=24),
) -> Dict[str, Any]:
    """
    Build the GATE_PASS payload from the application's current fields.

    Args:
        application: Application being approved
        approved_by: Name of the approving department agent
        approved_at: Approval instant (UTC)
        company_name: Organization label printed on the pass
        validity: How long the pass stays valid after approval

    Returns:
        Payload dict in wire order
    """
    return {
        "type": CREDENTIAL_TYPE,
        "id": str(application.id),
        "name": application.visitor_name,
        "email": application.visitor_email,
        "phone": application.visitor_phone,
        "department": application.department,
        "purpose": application.purpose,
        "visitDate": application.visit_date,
        "visitTime": application.visit_time,
        "duration": application.duration,
        "approvedBy": approved_by,
        "approvedAt": format_timestamp(approved_at),
        "vehicleNumber": application.vehicle_number or None,
        "companyName": company_name,
        "validUntil": format_timestamp(approved_at + validity),
    }


def serialize_payload(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def simplify_payload(serialized: str) -> str:
    """
    Shrink long payloads so the QR code stays scannable.

    Payloads up to SIMPLIFY_THRESHOLD characters are returned as-is.
    Longer ones keep only the fields a guard needs, with purpose truncated.
    """
    if len(serialized) <= SIMPLIFY_THRESHOLD:
        return serialized

    try:
        data = json.loads(serialized)
    except ValueError:
        return serialized

    purpose = data.get("purpose")
    simplified = {
        "id": data.get("id"),
        "name": data.get("name"),
        "department": data.get("department"),
        "visitDate": data.get("visitDate"),
        "visitTime": data.get("visitTime"),
        "purpose": purpose[:PURPOSE_PREVIEW_LENGTH] if purpose else purpose,
        "approvedBy": data.get("approvedBy"),
    }
    return serialize_payload(simplified)
