from typing import Any, Mapping, Optional

from tly.api.v1.endpoints import Endpoint
from tly.dispatcher import RequestDispatcher


class Resource:
    """Base class for resource operations.

    Subclasses hold no state of their own; each method applies one catalog
    Endpoint to the shared dispatcher.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: str = "",
        payload: Any = None,
    ) -> Any:
        path = endpoint.path_for(**path_params) if path_params else endpoint.path
        return self._dispatcher.dispatch(
            endpoint.method,
            path,
            query=query,
            payload=payload,
            result=endpoint.result,
        )
