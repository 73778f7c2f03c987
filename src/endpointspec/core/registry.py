"""Name-keyed registry of endpoint specifications"""

import logging
from collections.abc import Iterable, Iterator

from endpointspec.models.endpoint import EndpointSpec

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """
    Read-mostly catalog of endpoint specifications keyed by metadata name.

    Populated once at import time and only read afterwards.
    """

    def __init__(self, endpoints: Iterable[EndpointSpec] = ()) -> None:
        self._endpoints: dict[str, EndpointSpec] = {}
        for endpoint in endpoints:
            self.register(endpoint)

    def register(self, endpoint: EndpointSpec) -> EndpointSpec:
        """
        Add an endpoint to the registry.

        Args:
            endpoint: Endpoint to add

        Returns:
            The same endpoint, so registration can wrap a constant definition

        Raises:
            ValueError: If an endpoint with the same name is already registered
        """
        name = endpoint.name
        if name in self._endpoints:
            raise ValueError(f"Endpoint '{name}' is already registered")

        uncovered = endpoint.uncovered_status_codes()
        if uncovered:
            logger.warning(
                f"Endpoint '{name}' has no response for {len(uncovered)} status codes "
                f"(first: {uncovered[0]}); add a catch-all response"
            )

        self._endpoints[name] = endpoint
        return endpoint

    def get(self, name: str) -> EndpointSpec:
        try:
            return self._endpoints[name]
        except KeyError:
            raise KeyError(f"Unknown endpoint: '{name}'") from None

    def by_tag(self, tag: str) -> list[EndpointSpec]:
        return [e for e in self._endpoints.values() if tag in e.metadata.tags]

    def names(self) -> list[str]:
        return list(self._endpoints)

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[EndpointSpec]:
        return iter(self._endpoints.values())

    def __len__(self) -> int:
        return len(self._endpoints)

    def __repr__(self) -> str:
        return f"EndpointRegistry(endpoints={len(self._endpoints)})"
