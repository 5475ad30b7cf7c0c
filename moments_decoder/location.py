from __future__ import annotations

from .coerce import parse_float_or
from .post import Location
from .tags import extract_attr, extract_block, extract_tag_text


def _city(buffer: str) -> str:
    city = extract_attr(buffer, "location", "city")
    if city:
        return city
    block = extract_block(buffer, "location")
    if block is None:
        return ""
    return extract_tag_text(block, "city")


def decode_location(buffer: str) -> Location | None:
    """
    Decode the `<location>` element of a payload.

    Coordinates alone are not enough: without a city or POI name the post has
    no location at all.
    """
    city = _city(buffer)
    poi_name = extract_attr(buffer, "location", "poiName")

    if not city and not poi_name:
        return None

    return Location(
        city=city,
        latitude=parse_float_or(extract_attr(buffer, "location", "latitude")),
        longitude=parse_float_or(extract_attr(buffer, "location", "longitude")),
        poi_name=poi_name,
        poi_address=extract_attr(buffer, "location", "poiAddress"),
    )
