from collections.abc import Iterable, Sequence

from interlock_net.network_analysis.network import AffiliationRecord


def validate_records(records: Iterable[object]) -> list[AffiliationRecord]:
    """Check the analysis precondition and normalize records.

    Records must be ``AffiliationRecord`` objects or (actor, entity) pairs of
    non-empty, already trimmed strings. A violation is a caller bug, so the
    first offending record raises instead of being skipped.

    Returns:
        The records as a list of AffiliationRecord, order preserved

    Raises:
        ValueError: If a record is malformed
    """
    validated: list[AffiliationRecord] = []
    for index, record in enumerate(records):
        if isinstance(record, AffiliationRecord):
            fields: Sequence[object] = (record.actor, record.entity)
        elif isinstance(record, Sequence) and not isinstance(record, str):
            fields = record
        else:
            raise ValueError(f"Record {index} is not an (actor, entity) pair: {record!r}")

        if len(fields) != 2:  # noqa: PLR2004
            raise ValueError(f"Record {index} has {len(fields)} fields, expected 2: {record!r}")

        for label, value in zip(("actor", "entity"), fields, strict=True):
            if not isinstance(value, str):
                raise ValueError(f"Record {index}: {label} must be a string, got {value!r}")
            if not value or value != value.strip():
                raise ValueError(
                    f"Record {index}: {label} must be a non-empty trimmed string, got {value!r}"
                )

        actor, entity = fields
        validated.append(AffiliationRecord(actor=actor, entity=entity))
    return validated
