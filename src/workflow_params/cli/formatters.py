"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from rich.table import Table

from workflow_params.core.models import ParameterStoreState
from workflow_params.core.types import ParameterType


def build_findings_table(state: ParameterStoreState) -> Table:
    """One row per (parameter, field) finding, ordered by parameter name."""
    table = Table(title="Parameter validation findings")
    table.add_column("Parameter")
    table.add_column("Type")
    table.add_column("Field")
    table.add_column("Message", style="red")

    rows = []
    for parameter_id, errors in state.validation_errors.items():
        definition = state.definitions.get(parameter_id)
        name = definition.name if definition and definition.name else f"<unnamed {parameter_id}>"
        type_label = definition.type.value if definition and definition.type else "-"
        for field in errors.fields():
            rows.append((name, type_label, field.value, errors.get(field) or ""))

    for row in sorted(rows, key=lambda r: (r[0].lower(), r[2])):
        table.add_row(*row)
    return table


def build_types_table() -> Table:
    table = Table(title="Workflow parameter types")
    table.add_column("Type")
    table.add_column("Accepted values")
    hints = {
        ParameterType.ARRAY: "JSON array",
        ParameterType.BOOL: "true / false",
        ParameterType.FLOAT: "number",
        ParameterType.INT: "integer",
        ParameterType.OBJECT: "JSON object",
        ParameterType.SECURE_OBJECT: "JSON object",
        ParameterType.SECURE_STRING: "any text",
        ParameterType.STRING: "any text",
    }
    for parameter_type in ParameterType:
        table.add_row(parameter_type.value, hints[parameter_type])
    return table


__all__ = ["build_findings_table", "build_types_table"]
