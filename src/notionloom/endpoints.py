"""Defines the Notion API endpoints as static descriptor records.

Each API operation is described by one `EndpointDescriptor`: its HTTP method,
its path template, and the names of the call arguments that travel in the
query string and in the JSON body. Resource clients turn a descriptor and the
caller's arguments into a `RequestSpec` with `build_request_spec`.
"""

from collections.abc import Mapping
from string import Formatter
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import ValidationError
from .helpers import pick
from .types import HttpMethod, RequestSpec


class EndpointDescriptor(BaseModel):
    """Static metadata for one API operation.

    Attributes:
        method: The HTTP method of the operation.
        path_template: Path relative to the API prefix, with ``{name}``
            placeholders for path parameters.
        query_params: Argument names sent as query-string parameters.
        body_params: Argument names sent in the JSON body. An empty tuple
            means the operation never sends a body.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path_template: str
    query_params: tuple[str, ...] = ()
    body_params: tuple[str, ...] = ()

    @property
    def path_params(self) -> tuple[str, ...]:
        """Names of the placeholders in `path_template`, in order."""
        return tuple(
            field_name
            for _, field_name, _, _ in Formatter().parse(self.path_template)
            if field_name
        )

    @model_validator(mode="after")
    def _check_disjoint_params(self) -> "EndpointDescriptor":
        overlap = set(self.query_params) & set(self.body_params)
        if overlap:
            raise ValueError(
                f"{self.path_template}: parameters {sorted(overlap)} are declared "
                "as both query and body parameters"
            )
        shadowed = set(self.path_params) & (
            set(self.query_params) | set(self.body_params)
        )
        if shadowed:
            raise ValueError(
                f"{self.path_template}: path parameters {sorted(shadowed)} are also "
                "declared as query or body parameters"
            )
        return self

    def build_path(self, args: Mapping[str, Any]) -> str:
        """Substitute the path parameters found in `args` into the template.

        Raises:
            ValidationError: If a path parameter is missing or None.
        """
        missing = [name for name in self.path_params if args.get(name) is None]
        if missing:
            raise ValidationError(
                f"Missing required path parameter(s) {missing} for "
                f"{self.method} {self.path_template}"
            )
        return self.path_template.format(
            **{name: quote(str(args[name]), safe="") for name in self.path_params}
        )


def build_request_spec(
    endpoint: EndpointDescriptor,
    args: Mapping[str, Any],
    *,
    auth: str | None = None,
) -> RequestSpec:
    """Compose a `RequestSpec` from a descriptor and the call arguments.

    Query and body parameters are picked from `args` by name; arguments the
    descriptor does not list are ignored. Operations without body parameters
    produce a spec with no body at all.
    """
    query = pick(args, endpoint.query_params)
    body = pick(args, endpoint.body_params) if endpoint.body_params else None
    return RequestSpec(
        path=endpoint.build_path(args),
        method=endpoint.method,
        query=query or None,
        body=body,
        auth=auth,
    )


# --- Databases ---
DATABASES_LIST = EndpointDescriptor(
    method="GET",
    path_template="databases",
    query_params=("start_cursor", "page_size"),
)
DATABASES_RETRIEVE = EndpointDescriptor(
    method="GET",
    path_template="databases/{database_id}",
)
DATABASES_QUERY = EndpointDescriptor(
    method="POST",
    path_template="databases/{database_id}/query",
    body_params=("filter", "sorts", "start_cursor", "page_size"),
)

# --- Pages ---
PAGES_CREATE = EndpointDescriptor(
    method="POST",
    path_template="pages",
    body_params=("parent", "properties", "children"),
)
PAGES_RETRIEVE = EndpointDescriptor(
    method="GET",
    path_template="pages/{page_id}",
)
PAGES_UPDATE = EndpointDescriptor(
    method="PATCH",
    path_template="pages/{page_id}",
    body_params=("properties", "archived"),
)

# --- Blocks ---
BLOCKS_CHILDREN_LIST = EndpointDescriptor(
    method="GET",
    path_template="blocks/{block_id}/children",
    query_params=("start_cursor", "page_size"),
)
BLOCKS_CHILDREN_APPEND = EndpointDescriptor(
    method="PATCH",
    path_template="blocks/{block_id}/children",
    body_params=("children",),
)

# --- Users ---
USERS_LIST = EndpointDescriptor(
    method="GET",
    path_template="users",
    query_params=("start_cursor", "page_size"),
)
USERS_RETRIEVE = EndpointDescriptor(
    method="GET",
    path_template="users/{user_id}",
)

# --- Search ---
SEARCH = EndpointDescriptor(
    method="POST",
    path_template="search",
    body_params=("query", "sort", "filter", "start_cursor", "page_size"),
)
