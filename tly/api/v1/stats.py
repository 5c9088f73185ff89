from tly.api.v1 import endpoints
from tly.api.v1.base import Resource
from tly.builders.query import build_query
from tly.schemas.dto.responses.stats import LinkStats


class StatsResource(Resource):
    def get(self, short_url: str) -> LinkStats:
        """Click statistics for one short link, as of now."""
        return self._call(endpoints.GET_STATS, query=build_query({"short_url": short_url}))
