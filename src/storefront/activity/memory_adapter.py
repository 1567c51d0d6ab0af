"""In-memory activity adapters for development and testing.

Both keep at most ``max_entries`` records and drop the oldest first.
"""

from datetime import UTC, datetime

from storefront.activity.port import ActivityEntry, ActivityLogger, CustomerFieldStore

DEFAULT_MAX_ENTRIES = 10_000


class InMemoryActivityLog(ActivityLogger):
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self.max_entries = max_entries
        self.entries: list[ActivityEntry] = []

    def record(self, action_key, entity_id, customer_id, remote_address, message, subject) -> None:
        self.entries.append(
            ActivityEntry(
                action_key=action_key,
                entity_id=str(entity_id),
                customer_id=str(customer_id),
                remote_address=remote_address,
                message=message,
                subject=subject,
                recorded_at=datetime.now(UTC),
            )
        )
        if len(self.entries) > self.max_entries:
            del self.entries[: len(self.entries) - self.max_entries]

    def keys(self) -> list[str]:
        return [entry.action_key for entry in self.entries]


class InMemoryCustomerFieldStore(CustomerFieldStore):
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self.max_entries = max_entries
        self.fields: dict[tuple[str, str, str], str] = {}

    def save_field(self, customer_id, key, value, store_id) -> None:
        field_key = (str(customer_id), key, str(store_id))
        # Re-inserting moves the key to the newest position
        self.fields.pop(field_key, None)
        self.fields[field_key] = value
        while len(self.fields) > self.max_entries:
            del self.fields[next(iter(self.fields))]

    def get_field(self, customer_id, key, store_id) -> str | None:
        return self.fields.get((str(customer_id), key, str(store_id)))
