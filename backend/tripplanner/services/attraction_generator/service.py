"""Attraction generator: the end-to-end pipeline for one city.

extract city -> synthesize candidate names -> geocode + classify each one.

Candidates are resolved concurrently (bounded by a semaphore) but results
keep candidate order. Cancelling ``generate()``, or an unexpected error in
one lookup, cancels every pending lookup and nothing partial is returned.
"""

import asyncio
import logging
import time
from typing import Optional

from tripplanner.models import Attraction
from tripplanner.services.city_extractor import CityNameExtractor
from tripplanner.services.geo_enricher import GeoEnricher
from tripplanner.services.name_synthesizer import AttractionNameSynthesizer

logger = logging.getLogger(__name__)


class AttractionGenerator:
    """Generate attractions for a free-text city."""

    def __init__(
        self,
        extractor: CityNameExtractor,
        synthesizer: AttractionNameSynthesizer,
        enricher: GeoEnricher,
        concurrency: int = 2,
    ) -> None:
        self._extractor = extractor
        self._synthesizer = synthesizer
        self._enricher = enricher
        self._concurrency = max(1, concurrency)

    async def generate(
        self,
        city: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        criteria: Optional[str] = None,
    ) -> list[Attraction]:
        """Generate up to 15 attractions for ``city``.

        ``start_date``/``end_date`` do not affect generation. Candidates that
        cannot be located at all are left out, so the result may be short or
        empty; that is not an error.
        """
        start = time.monotonic()
        canonical = self._extractor.extract(city)
        names = self._synthesizer.synthesize(canonical, criteria)
        logger.info(
            f"[GENERATE] {canonical}: {len(names)} candidates "
            f"(criteria={criteria!r}, dates={start_date}..{end_date})"
        )

        semaphore = asyncio.Semaphore(self._concurrency)

        async def resolve_one(name: str) -> Optional[Attraction]:
            async with semaphore:
                return await self._enricher.resolve(name, canonical)

        tasks = [asyncio.ensure_future(resolve_one(name)) for name in names]
        try:
            results = await asyncio.gather(*tasks)
        finally:
            # gather does not cancel siblings when one task raises
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
        attractions = [attraction for attraction in results if attraction is not None]

        elapsed = time.monotonic() - start
        logger.info(
            f"[GENERATE] {canonical}: {len(attractions)}/{len(names)} attractions ({elapsed:.1f}s)"
        )
        return attractions
