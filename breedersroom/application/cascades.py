"""Follow-up writes attached to aggregate events.

Use cases publish an event after their own write; every hook registered for
that event type then runs inside the same unit of work. A hook may return
further events (a sold adoption deletes its individual, which in turn
revokes that individual's parent links), which are processed in order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Awaitable, Callable, Iterable

from breedersroom.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

Hook = Callable[[UnitOfWork, object], Awaitable[Iterable[object] | None]]


class CascadeRegistry:
    def __init__(self) -> None:
        self._hooks: dict[type, list[Hook]] = defaultdict(list)

    def register(self, event_type: type) -> Callable[[Hook], Hook]:
        def decorator(hook: Hook) -> Hook:
            self._hooks[event_type].append(hook)
            return hook

        return decorator

    def hooks_for(self, event_type: type) -> list[Hook]:
        return list(self._hooks.get(event_type, ()))

    async def run(self, uow: UnitOfWork, *events: object) -> None:
        pending = list(events)
        while pending:
            event = pending.pop(0)
            for hook in self.hooks_for(type(event)):
                logger.debug("Running cascade %s for %s", hook.__name__, type(event).__name__)
                follow_ups = await hook(uow, event)
                if follow_ups:
                    pending.extend(follow_ups)


cascades = CascadeRegistry()


def _register_defaults(registry: CascadeRegistry) -> None:
    from breedersroom.application.events.models import (
        AdoptionDeletedEvent,
        AdoptionSavedEvent,
        IndividualDeletedEvent,
    )
    from breedersroom.application.use_cases.adoptions import sync_sale_status
    from breedersroom.application.use_cases.pedigree import cascade_delete_links

    registry.register(IndividualDeletedEvent)(cascade_delete_links.on_individual_deleted)
    registry.register(AdoptionSavedEvent)(sync_sale_status.on_adoption_saved)
    registry.register(AdoptionDeletedEvent)(sync_sale_status.on_adoption_deleted)


_register_defaults(cascades)
