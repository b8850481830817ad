"""Trigger listing the cats up for adoption at Inges Kattehjem."""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Union

from src.fetch.endpoints import get_listing_url
from src.parse.age import guess_age_in_months
from src.parse.digest import create_content_digest
from src.parse.filters import filter_cats
from src.parse.listing_parser import extract_cats
from src.parse.models import AgedCat, Cat, FilterOptions

logger = logging.getLogger(__name__)


class HttpCapability(Protocol):
    def get(self, url: str) -> Awaitable[Any]:
        """Fetch a URL; the result has the document text in `.data`."""
        ...


@dataclass
class TriggerHelpers:
    """Capabilities the trigger needs from its caller.

    `log` follows `logging.Logger`: it needs `debug`, `info`, `warning` and
    `error` (`warning`, not `warn`). `http.get(url)` is awaited and must
    return an object whose `.data` is the page text.
    """

    http: HttpCapability
    log: Any = field(default=logger)
    create_content_digest: Callable[[Any], str] = field(default=create_content_digest)


class KattehjemTrigger:
    """
    Gets the cats up for adoption at https://inges-kattehjem.dk/adopter-en-kat/.

    Cats can be filtered by tags (e.g. location or indoor/outdoor), by age in
    months and by whether they have been adopted (sold cats are dropped by
    default).
    """

    def __init__(
        self,
        helpers: TriggerHelpers,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
    ):
        if options is None:
            options = FilterOptions()
        elif not isinstance(options, FilterOptions):
            options = FilterOptions.model_validate(dict(options))
        self.options = options
        self.log = helpers.log
        self.http = helpers.http
        self.create_content_digest = helpers.create_content_digest

    def get_item_key(self, cat: Optional[Cat]) -> str:
        """Stable identity of a cat across runs."""
        if cat is None:
            return self.create_content_digest(cat)
        if cat.name and cat.link:
            return f"{cat.name}__{cat.link}"
        self.log.error(f"Getting key for cat without name and link: {cat!r}")
        # The link slot is always empty here; keys of existing items depend on it
        return self.create_content_digest({
            "name": cat.name,
            "description": cat.description,
            "tags": list(cat.tags),
            "link": None,
        })

    async def run(self) -> list[AgedCat]:
        """Fetch, age and filter the listed cats."""
        cats = await self.get_cats()
        self.log.debug(f"Found cats: {cats}")
        aged_cats = [
            AgedCat(**cat.model_dump(), age_in_months=self.guess_age_in_months(cat))
            for cat in cats
        ]
        filtered_cats = self.filter_cats(aged_cats)
        self.log.debug(f"Post-filtering cats: {filtered_cats}")
        return filtered_cats

    async def get_cats(self) -> list[Cat]:
        """Fetch the listing page and extract its cats."""
        response = await self.http.get(get_listing_url())
        data = response.data
        self.log.debug(f"Loaded HTML data successfully (length: {len(data)})")
        return extract_cats(data, log=self.log)

    def guess_age_in_months(self, cat: Cat) -> float:
        return guess_age_in_months(cat, log=self.log)

    def filter_cats(self, cats: list[AgedCat]) -> list[AgedCat]:
        return filter_cats(cats, self.options)
