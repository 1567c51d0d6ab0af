"""Serialization helpers for the ACL lists stored on catalog aggregates.

Customer group and store restrictions are kept as JSON arrays in ``Text``
fields. An empty list means the entity is not restricted on that axis.
"""

import json


def dump_ids(ids) -> str:
    return json.dumps(sorted({str(i) for i in ids})) if ids else "[]"


def load_ids(raw) -> list[str]:
    if not raw:
        return []
    if isinstance(raw, str):
        return [str(i) for i in json.loads(raw)]
    return [str(i) for i in raw]
