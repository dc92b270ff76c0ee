"""Static translation bundles shipped with the application.

Bundles live in YAML files named ``<namespace>.<language>.yml`` whose single
top-level key is the namespace:

    package:
      valid.for: "Gültig für"

Nested mappings are flattened to dotted keys.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# language -> namespace -> key -> text
Resources = Dict[str, Dict[str, Dict[str, str]]]


def _flatten(data: Mapping[str, Any], parent: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, full_key))
        elif value is not None:
            flat[full_key] = str(value)
    return flat


class YAMLBundleLoader:
    """Reads every ``*.yml`` file of a locales directory.

    Attributes:
        locales_dir: Directory containing the YAML bundles
    """

    def __init__(self, locales_dir: Path):
        self.locales_dir = Path(locales_dir)
        if not self.locales_dir.exists():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

    def load(self) -> Resources:
        """Load all bundles.

        Returns:
            Nested mapping language -> namespace -> key -> text.

        Raises:
            ValueError: If a file cannot be parsed.
        """
        resources: Resources = {}
        yaml_files = sorted(self.locales_dir.glob("*.yml"))

        for yaml_file in yaml_files:
            parts = yaml_file.stem.split(".")
            if len(parts) != 2:
                logger.warning("skipped_bundle_file", file=str(yaml_file))
                continue
            file_namespace, language = parts

            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if not data:
                continue
            if not isinstance(data, Mapping):
                raise ValueError(f"Bundle {yaml_file} must be a mapping")

            self._merge_yaml_data(
                resources.setdefault(language, {}), data, yaml_file, file_namespace
            )

        logger.info(
            "loaded_static_bundles",
            locales_dir=str(self.locales_dir),
            file_count=len(yaml_files),
            languages=sorted(resources),
        )
        return resources

    def _merge_yaml_data(
        self,
        target: Dict[str, Dict[str, str]],
        data: Mapping[str, Any],
        yaml_file: Path,
        file_namespace: str,
    ) -> None:
        for namespace, messages in data.items():
            if not isinstance(messages, Mapping):
                raise ValueError(
                    f"Namespace '{namespace}' in {yaml_file} must be a mapping"
                )
            if namespace != file_namespace:
                logger.warning(
                    "bundle_namespace_mismatch",
                    file=str(yaml_file),
                    namespace=namespace,
                )
            target.setdefault(str(namespace), {}).update(_flatten(messages))


class StaticResourceBundle:
    """Read-only translations compiled into the application.

    Content never changes at runtime; lookups return copies so callers cannot
    mutate the bundle.
    """

    def __init__(self, resources: Optional[Mapping[str, Mapping[str, Mapping[str, str]]]] = None):
        self._resources: Resources = {
            language: {ns: dict(keys) for ns, keys in namespaces.items()}
            for language, namespaces in (resources or {}).items()
        }

    @classmethod
    def from_directory(cls, locales_dir: Path) -> "StaticResourceBundle":
        return cls(YAMLBundleLoader(locales_dir).load())

    def has_namespace(self, language: str, namespace: str) -> bool:
        return namespace in self._resources.get(language, {})

    def get_namespace(self, language: str, namespace: str) -> Optional[Dict[str, str]]:
        bundle = self._resources.get(language, {}).get(namespace)
        return dict(bundle) if bundle is not None else None

    def get_message(self, language: str, namespace: str, key: str) -> Optional[str]:
        return self._resources.get(language, {}).get(namespace, {}).get(key)

    def languages(self) -> List[str]:
        return sorted(self._resources)

    def namespaces(self, language: Optional[str] = None) -> List[str]:
        if language is not None:
            return sorted(self._resources.get(language, {}))
        found = set()
        for namespaces in self._resources.values():
            found.update(namespaces)
        return sorted(found)
