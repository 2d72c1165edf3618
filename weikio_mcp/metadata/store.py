"""Cache-or-download store for the Apache Camel metadata catalogs."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import yaml

from weikio_mcp.metadata.normalize import process_component_data

if TYPE_CHECKING:
    from typing import Any

    from weikio_mcp.metadata.models import Component, Kamelet, SpiBean

logger = logging.getLogger(__name__)

GITHUB_BASE_URL = "https://raw.githubusercontent.com/apache/camel-karavan/main/karavan-vscode/metadata"
DEFAULT_METADATA_DIR = Path(tempfile.gettempdir()) / "weikio_metadata"
DEFAULT_TIMEOUT_SECONDS = 60.0

COMPONENTS_FILE_NAME = "components.json"
KAMELETS_FILE_NAME = "kamelets.yaml"
SPI_BEANS_FILE_NAME = "spiBeans.json"

COMPONENT_SEARCH_FIELDS = ("name", "description", "label", "scheme")


class MetadataUnavailableError(RuntimeError):
    """Raised by the tool layer when the metadata catalogs cannot be loaded."""


def _matches(value: Any, needle: str) -> bool:
    return isinstance(value, str) and bool(value) and needle in value.lower()


def _equals_ignore_case(value: Any, name: str) -> bool:
    return isinstance(value, str) and bool(value) and value.lower() == name


def _write_atomic(path: Path, text: str) -> None:
    """Write text to path through a temp file so readers never see a partial file."""
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def parse_kamelets(text: str) -> list[Kamelet]:
    """Parse a multi-document YAML stream, keeping only mapping documents.

    A syntax error anywhere in the stream raises ``yaml.YAMLError``.
    """
    return [doc for doc in yaml.safe_load_all(text) if isinstance(doc, Mapping)]


def decode_component_body(response: httpx.Response) -> Any:
    """Decode a components response that may be JSON, or JSON wrapping a JSON string."""
    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Error parsing components response: {e}")
        return []
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            logger.error(f"Error parsing string-encoded components response: {e}")
            return []
    return payload


class MetadataStore:
    """In-memory components, kamelets and SPI beans backed by local cache files.

    ``initialize`` loads each catalog from ``metadata_dir`` when a cache file is
    present and downloads it from ``base_url`` otherwise. Once every catalog
    has loaded the store is ready and further calls do nothing.
    """

    def __init__(
        self,
        metadata_dir: Path | str = DEFAULT_METADATA_DIR,
        base_url: str = GITHUB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.metadata_dir = Path(metadata_dir)
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

        self._components: list[Component] = []
        self._kamelets: list[Kamelet] = []
        self._spi_beans: list[SpiBean] = []
        self._initialized = False

        self.metadata_dir.mkdir(parents=True, exist_ok=True)

    @property
    def components_file(self) -> Path:
        return self.metadata_dir / COMPONENTS_FILE_NAME

    @property
    def kamelets_file(self) -> Path:
        return self.metadata_dir / KAMELETS_FILE_NAME

    @property
    def spi_beans_file(self) -> Path:
        return self.metadata_dir / SPI_BEANS_FILE_NAME

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def component_count(self) -> int:
        return len(self._components)

    @property
    def kamelet_count(self) -> int:
        return len(self._kamelets)

    @property
    def spi_bean_count(self) -> int:
        return len(self._spi_beans)

    @property
    def spi_beans(self) -> list[SpiBean]:
        return list(self._spi_beans)

    def _url(self, file_name: str) -> str:
        return f"{self.base_url}/{file_name}"

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport, follow_redirects=True)

    async def initialize(self) -> None:
        """Load all catalogs, from cache where possible; no-op once ready.

        Steps run in order (components, kamelets, SPI beans). The first failing
        step aborts initialization and its error propagates; catalogs loaded by
        earlier steps are kept and the next call starts over.
        """
        if self._initialized:
            return

        try:
            async with self._http_client() as client:
                await self._load_or_download_components(client)
                await self._load_or_download_kamelets(client)
                await self._load_or_download_spi_beans(client)
        except Exception as e:
            logger.error(f"Failed to initialize metadata store: {e}")
            raise

        self._initialized = True

    async def _load_or_download_components(self, client: httpx.AsyncClient) -> None:
        if not self.components_file.exists():
            await self._download_components(client)
            return

        logger.info(f"Using cached components from {self.components_file}")
        try:
            data = json.loads(self.components_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Cached components invalid, re-downloading: {e}")
            await self._download_components(client)
            return

        self._components = process_component_data(data)
        logger.info(f"Loaded {len(self._components)} components from cache")

    async def _download_components(self, client: httpx.AsyncClient) -> None:
        url = self._url(COMPONENTS_FILE_NAME)
        logger.info(f"Downloading components from {url}")
        response = await client.get(url)
        response.raise_for_status()

        components = process_component_data(decode_component_body(response))
        self._components = components
        logger.info(f"Downloaded {len(components)} components")

        if components:
            _write_atomic(self.components_file, json.dumps(components, indent=2))
        else:
            logger.warning("No components were downloaded, not updating cache file")

    async def _load_or_download_kamelets(self, client: httpx.AsyncClient) -> None:
        if self.kamelets_file.exists():
            logger.info(f"Using cached kamelets from {self.kamelets_file}")
            self._kamelets = parse_kamelets(self.kamelets_file.read_text(encoding="utf-8"))
            logger.info(f"Loaded {len(self._kamelets)} kamelets from cache")
            return

        url = self._url(KAMELETS_FILE_NAME)
        logger.info(f"Downloading kamelets from {url}")
        response = await client.get(url)
        response.raise_for_status()

        kamelets = parse_kamelets(response.text)
        self._kamelets = kamelets
        logger.info(f"Downloaded {len(kamelets)} kamelets")

        if kamelets:
            _write_atomic(self.kamelets_file, response.text)
        else:
            logger.warning("No kamelets were downloaded, not updating cache file")

    async def _load_or_download_spi_beans(self, client: httpx.AsyncClient) -> None:
        if self.spi_beans_file.exists():
            logger.debug(f"Using cached SPI beans from {self.spi_beans_file}")
            self._spi_beans = json.loads(self.spi_beans_file.read_text(encoding="utf-8"))
            return

        url = self._url(SPI_BEANS_FILE_NAME)
        logger.info(f"Downloading SPI beans from {url}")
        response = await client.get(url)
        response.raise_for_status()

        payload = response.json()
        spi_beans = payload if isinstance(payload, list) else []
        self._spi_beans = spi_beans

        if spi_beans:
            _write_atomic(self.spi_beans_file, json.dumps(spi_beans, indent=2))
        else:
            logger.warning("No SPI beans were downloaded, not updating cache file")

    def search_components(self, query: str) -> list[Component]:
        """Case-insensitive substring search over name, description, label and scheme."""
        needle = query.lower()
        results = [
            component
            for component in self._components
            if isinstance(component, Mapping)
            and any(_matches(component.get(field), needle) for field in COMPONENT_SEARCH_FIELDS)
        ]
        logger.debug(f"Found {len(results)} of {len(self._components)} components matching {query!r}")
        return results

    def get_component(self, name: str) -> Component | None:
        """Return the first component whose name equals ``name``, ignoring case."""
        lowered = name.lower()
        return next(
            (c for c in self._components if isinstance(c, Mapping) and _equals_ignore_case(c.get("name"), lowered)),
            None,
        )

    def search_kamelets(self, query: str) -> list[Kamelet]:
        """Case-insensitive substring search over kamelet name, title and description.

        Kamelets without ``metadata`` or ``spec.definition`` never match.
        """
        needle = query.lower()
        results: list[Kamelet] = []
        for kamelet in self._kamelets:
            metadata = kamelet.get("metadata")
            spec = kamelet.get("spec")
            if not isinstance(metadata, Mapping) or not isinstance(spec, Mapping):
                continue
            definition = spec.get("definition")
            if not isinstance(definition, Mapping):
                continue
            if (
                _matches(metadata.get("name"), needle)
                or _matches(definition.get("title"), needle)
                or _matches(definition.get("description"), needle)
            ):
                results.append(kamelet)
        logger.debug(f"Found {len(results)} of {len(self._kamelets)} kamelets matching {query!r}")
        return results

    def get_kamelet(self, name: str) -> Kamelet | None:
        """Return the first kamelet whose ``metadata.name`` equals ``name``, ignoring case."""
        lowered = name.lower()
        for kamelet in self._kamelets:
            metadata = kamelet.get("metadata")
            if isinstance(metadata, Mapping) and _equals_ignore_case(metadata.get("name"), lowered):
                return kamelet
        return None


def metadata_store_from_env() -> MetadataStore:
    """Build a store from ``WEIKIO_METADATA_*`` environment variables."""
    return MetadataStore(
        metadata_dir=os.environ.get("WEIKIO_METADATA_DIR") or DEFAULT_METADATA_DIR,
        base_url=os.environ.get("WEIKIO_METADATA_BASE_URL") or GITHUB_BASE_URL,
        timeout=float(os.environ.get("WEIKIO_METADATA_TIMEOUT") or DEFAULT_TIMEOUT_SECONDS),
    )
