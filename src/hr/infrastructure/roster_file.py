"""JSON roster file reader.

A roster file looks like::

    {
      "positions": [
        {"id": "1", "name": "Junior Developer", "min_salary": 30000, "max_salary": 50000}
      ],
      "employees": [
        {"id": "1", "name": "John Doe", "position_id": "1", "salary": 40000}
      ]
    }

Numbers are passed on as strings so the domain coerces them to Decimal
without a float round-trip.
"""

from __future__ import annotations

import json
from pathlib import Path

from hr.application.dto import EmployeeSpec, PositionSpec
from hr.domain.exceptions import ValidationError


def read_roster(path: Path) -> tuple[list[PositionSpec], list[EmployeeSpec]]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ValidationError(f"Roster file {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Roster file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"Roster file {path} must contain a JSON object")

    try:
        positions = [
            PositionSpec(
                id=str(item["id"]),
                name=item["name"],
                min_salary=str(item["min_salary"]),
                max_salary=str(item["max_salary"]),
            )
            for item in raw.get("positions", [])
        ]
        employees = [
            EmployeeSpec(
                id=str(item["id"]),
                name=item["name"],
                position_id=str(item["position_id"]),
                salary=str(item["salary"]),
            )
            for item in raw.get("employees", [])
        ]
    except KeyError as exc:
        raise ValidationError(f"Roster file {path} is malformed: missing {exc}") from exc
    except TypeError as exc:
        raise ValidationError(
            f"Roster file {path} is malformed: positions and employees "
            f"must be lists of objects"
        ) from exc

    return positions, employees
