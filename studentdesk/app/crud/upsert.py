"""Replace-semantics writes keyed by roll number."""

from dataclasses import dataclass, field
from typing import Any, Dict, Type

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from studentdesk.app.db.base_class import Base


@dataclass(frozen=True)
class Upsert:
    """Replace the row of `model` keyed by `rollno` with exactly `values`."""

    model: Type[Base]
    rollno: str
    values: Dict[str, Any] = field(default_factory=dict)


def apply_upsert(db: Session, op: Upsert):
    """
    Create the row if absent, otherwise overwrite every non-key column.

    Columns missing from op.values are reset to None, so the stored row never
    keeps values from a previous write.
    """
    columns = [attr.key for attr in inspect(op.model).column_attrs if attr.key != "rollno"]
    unknown = set(op.values) - set(columns)
    if unknown:
        raise ValueError(f"Unknown columns for {op.model.__name__}: {sorted(unknown)}")

    obj = db.get(op.model, op.rollno)
    if obj is None:
        obj = op.model(rollno=op.rollno, **op.values)
        db.add(obj)
    else:
        for column in columns:
            setattr(obj, column, op.values.get(column))
    db.flush()
    return obj
