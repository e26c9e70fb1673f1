# Centralized type aliases for request inputs.

from typing import Any, Dict, List, Mapping, Optional, Union

# A single query/form value.
RequestInput = Union[str, int, float, bool]

# A query/form value: one scalar, a list of scalars (repeated key), or None (key dropped).
RequestInputs = Optional[Union[RequestInput, List[RequestInput]]]

# Mapping accepted for query strings and url-encoded forms.
RequestParams = Mapping[str, RequestInputs]

# Anything json.dumps accepts.
JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
