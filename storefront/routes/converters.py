"""URL converters shared by the blueprints."""

from werkzeug.routing import IntegerConverter

from ..common.utils.validators import MAX_ID


class IdConverter(IntegerConverter):
    """Row id in a URL path; out-of-range values do not match the route."""

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault("min", 1)
        kwargs.setdefault("max", MAX_ID)
        super().__init__(map, *args, **kwargs)
