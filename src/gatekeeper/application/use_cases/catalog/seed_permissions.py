"""Seed default permissions use case."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gatekeeper.application.ports import PermissionCatalog
from gatekeeper.domain.entities import PermissionDescriptor
from gatekeeper.domain.permissions import DEFAULT_PERMISSION_DESCRIPTORS

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    """Outcome of one seeding run."""

    written: int
    total: int


class SeedDefaultPermissionsUseCase:
    """Upsert the compiled-in descriptors and load storage into the catalog.

    Safe to run on every boot. Codes present in storage but not in the
    compiled list are kept and loaded too.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        descriptors: Sequence[PermissionDescriptor] = DEFAULT_PERMISSION_DESCRIPTORS,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._descriptors = descriptors

    async def execute(self) -> SeedResult:
        async with self._uow_factory() as uow:
            written = await uow.permissions.upsert_many(self._descriptors)
            stored = await uow.permissions.list_all()

        self._catalog.seed(stored)
        logger.info(
            "Seeded permission catalog: %d written, %d stored in total",
            written,
            len(stored),
        )
        return SeedResult(written=written, total=len(stored))
