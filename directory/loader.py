"""Snapshot loader for employee and endorsement files."""

import json
import logging
import pandas as pd
from pathlib import Path
from typing import Any, Union
from pydantic import BaseModel
from schemas.directory import Employee, SkillEndorsement

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """Load directory snapshots from JSON or CSV files."""

    # CSV column name -> model field
    EMPLOYEE_COLUMNS = {
        "id": "id",
        "name": "name",
        "title": "title",
        "skills": "skills",
        "department": "department",
        "profileImage": "profile_image",
        "profile_image": "profile_image",
    }
    # Optional fields where blank or "null" cells mean missing
    NULLABLE_FIELDS = {"department", "profile_image", "endorser_id", "created_at"}

    ENDORSEMENT_COLUMNS = {
        "skill": "skill",
        "employeeId": "employee_id",
        "employee_id": "employee_id",
        "endorserId": "endorser_id",
        "endorser_id": "endorser_id",
        "createdAt": "created_at",
        "created_at": "created_at",
    }

    def load_employees(self, path: Union[str, Path]) -> list[Employee]:
        """
        Load an employee snapshot.

        Args:
            path: JSON (list of objects) or CSV file; CSV skills are comma-separated

        Returns:
            Validated employees in file order
        """
        records = self._read_records(path, self.EMPLOYEE_COLUMNS)
        for record in records:
            # JSON lists are kept verbatim; only CSV cells need splitting
            if not isinstance(record.get("skills"), list):
                record["skills"] = self._parse_array(record.get("skills"))
        employees = [Employee.model_validate(record) for record in records]
        logger.info(f"Loaded {len(employees)} employees from {path}")
        return employees

    def load_endorsements(self, path: Union[str, Path]) -> list[SkillEndorsement]:
        """
        Load endorsement events.

        Args:
            path: JSON (list of objects) or CSV file

        Returns:
            Validated endorsement events in file order
        """
        records = self._read_records(path, self.ENDORSEMENT_COLUMNS)
        endorsements = [SkillEndorsement.model_validate(record) for record in records]
        logger.info(f"Loaded {len(endorsements)} endorsements from {path}")
        return endorsements

    def _read_records(self, path: Union[str, Path], columns: dict[str, str]) -> list[dict]:
        path = Path(path)
        if path.suffix.lower() == ".json":
            return self._read_json(path)
        return self._read_csv(path, columns)

    def _read_json(self, path: Path) -> list[dict]:
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON snapshot {path}: {e}") from e

        if not isinstance(data, list):
            raise ValueError(f"Snapshot {path} must contain a JSON list of records")
        return [dict(item) for item in data]

    def _read_csv(self, path: Path, columns: dict[str, str]) -> list[dict]:
        # Try different encodings
        encodings = ['utf-8', 'utf-16', 'latin-1']
        df = None

        for encoding in encodings:
            try:
                df = pd.read_csv(path, encoding=encoding, dtype=str, keep_default_na=False)
                break
            except (UnicodeDecodeError, UnicodeError):
                logger.warning(f"Could not read {path} as {encoding}, trying next encoding")
                continue
            except pd.errors.ParserError as e:
                raise ValueError(f"Malformed CSV {path}: {e}") from e

        if df is None:
            raise ValueError(f"Could not read CSV with any supported encoding: {encodings}")

        df = df.rename(columns={c: columns[c] for c in df.columns if c in columns})
        df = df[[c for c in df.columns if c in columns.values()]]

        records = []
        for row in df.to_dict(orient="records"):
            records.append({
                k: self._clean_value(v) if k in self.NULLABLE_FIELDS else v
                for k, v in row.items()
            })
        return records

    @staticmethod
    def _clean_value(value: Any) -> Any:
        """Normalize null spellings to None."""
        if value is None:
            return None
        if isinstance(value, str) and value.strip() in ["", "null", "Null", "NULL", "nan", "NaN"]:
            return None
        return value

    @staticmethod
    def _parse_array(value: Any) -> list[str]:
        """
        Parse a skills field.

        Rules:
        - Split by comma
        - Strip whitespace
        - Drop empty or "null"
        - Deduplicate while preserving order

        Args:
            value: Raw value

        Returns:
            Parsed list
        """
        if not isinstance(value, str):
            return []

        items = value.split(',')

        cleaned = []
        seen = set()
        for item in items:
            item = str(item).strip()
            if not item or item.lower() in ['null', 'nan']:
                continue
            if item not in seen:
                cleaned.append(item)
                seen.add(item)

        return cleaned


def dump_models(models: list[BaseModel]) -> list[dict]:
    """Serialize models to JSON-ready dicts."""
    return [m.model_dump(mode="json", by_alias=True) for m in models]
