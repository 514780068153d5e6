from __future__ import annotations

from typing import Mapping, MutableMapping

from ra_server.core.errors import ValidationError
from ra_server.schemas.resource import ReferenceQuery
from ra_server.services.fields import FieldSpec


def scope_to_reference(
    filters: MutableMapping[str, str],
    reference: ReferenceQuery,
    fields: Mapping[str, FieldSpec],
) -> MutableMapping[str, str]:
    """Bind ``reference.target_field`` to the parent id inside ``filters``.

    The binding overrides any user-supplied value for the same field. An
    unknown target field is rejected instead of silently widening the query.
    """
    if reference.target_field not in fields:
        raise ValidationError(f'Unknown reference field "{reference.target_field}"')
    filters[reference.target_field] = reference.target_id
    return filters
