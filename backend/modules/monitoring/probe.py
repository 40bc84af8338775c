"""
Page implementation probe.

Asks the page-rendering layer whether a route has an implementation and
waits for the answer, bounded by a timeout. The probe never raises:

- the registry answers in time      -> PRESENT / ABSENT
- the registry times out            -> UNKNOWN
- the registry lookup itself fails  -> ABSENT
"""

import asyncio
import importlib.util
import logging
import re
from collections.abc import Iterable

from modules.routing.paths import segments

from .interfaces import IPageRegistry
from .models import ComponentStatus

logger = logging.getLogger(__name__)


def page_component_name(path: str) -> str:
    """
    Derive the page component name for a route pattern.

    ``/admin/crm/leads`` -> ``AdminCrmLeadsPage``,
    ``/customer-dashboard`` -> ``CustomerDashboardPage``,
    ``/`` -> ``HomePage``. Parameter segments are skipped.
    """
    parts = [part for part in segments(path) if not part.startswith(":")]
    if not parts:
        return "HomePage"
    words = [word for part in parts for word in re.split(r"[-_]", part) if word]
    return "".join(word[:1].upper() + word[1:] for word in words) + "Page"


def page_module_name(component: str) -> str:
    """``AdminCrmLeadsPage`` -> ``admin_crm_leads_page``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", component).lower()


class StaticPageRegistry:
    """Page registry backed by a fixed set of component names."""

    def __init__(self, components: Iterable[str] = ()):
        self._components = set(components)

    @classmethod
    def for_paths(cls, paths: Iterable[str]) -> "StaticPageRegistry":
        """Registry with one page per route pattern."""
        return cls(page_component_name(path) for path in paths)

    def add(self, component: str) -> None:
        self._components.add(component)

    async def has_page(self, path: str) -> bool:
        return page_component_name(path) in self._components


class ModulePageRegistry:
    """
    Page registry that looks for one module per page in a package.

    ``/admin/crm/leads`` is implemented when ``<package>.admin_crm_leads_page``
    can be found. The lookup runs in a worker thread since finding a module
    touches the filesystem.
    """

    def __init__(self, package: str):
        self._package = package

    @property
    def package(self) -> str:
        return self._package

    def _find(self, path: str) -> bool:
        module = page_module_name(page_component_name(path))
        return importlib.util.find_spec(f"{self._package}.{module}") is not None

    async def has_page(self, path: str) -> bool:
        return await asyncio.to_thread(self._find, path)


class ComponentProbe:
    """Awaited, time-bounded wrapper around a page registry."""

    def __init__(self, registry: IPageRegistry, timeout: float = 0.5):
        """
        Initialize the probe.

        Args:
            registry: Page-rendering collaborator to ask
            timeout: Seconds to wait before reporting UNKNOWN
        """
        self._registry = registry
        self._timeout = timeout

    async def probe(self, path: str) -> ComponentStatus:
        """Probe the registry for a route's page implementation."""
        try:
            found = await asyncio.wait_for(
                self._registry.has_page(path),
                timeout=self._timeout,
            )
        except TimeoutError:
            logger.warning(f"Page lookup for {path!r} timed out after {self._timeout}s")
            return ComponentStatus.UNKNOWN
        except Exception as e:
            logger.warning(f"Page lookup for {path!r} failed: {e}")
            return ComponentStatus.ABSENT

        return ComponentStatus.PRESENT if found else ComponentStatus.ABSENT
