"""Factory for creating the client and parsing query options."""

import logging
from typing import List, Optional

from ...client import MeiliMelo
from ...config import config_from_env, load_config_from_yaml
from ...facets import FacetBuilder, Facets
from ...search import At, Attr, Crop


def create_client(
    host: Optional[str] = None,
    key: Optional[str] = None,
    config_path: Optional[str] = None,
    timeout: Optional[float] = None,
) -> MeiliMelo:
    """Create a MeiliMelo descriptor from CLI options.

    Explicit options win over the YAML file, which wins over the environment.
    A YAML file also sets the log level, unless ``--verbose`` already enabled
    debug output.

    Args:
        host: Instance URL
        key: Secret key
        config_path: Optional YAML configuration file
        timeout: Request timeout in seconds

    Returns:
        Configured MeiliMelo instance
    """
    overrides = {"host": host, "secret_key": key, "timeout": timeout}
    if config_path:
        config = load_config_from_yaml(config_path)
        updated = config.model_dump()
        updated.update({k: v for k, v in overrides.items() if v is not None})
        config = config.model_validate(updated)
        root = logging.getLogger()
        if not root.isEnabledFor(logging.DEBUG):
            root.setLevel(config.log_level)
    else:
        config = config_from_env(**overrides)
    return config.to_client()


def parse_facets(groups: Optional[List[str]]) -> Optional[Facets]:
    """Parse ``--facet`` options into facet filters.

    Each option is one OR-group of ``attribute:value`` clauses separated by
    ``|``; repeated options are ANDed.

    Args:
        groups: Raw option values, e.g. ``["company:ACME|company:Big Corp", "roles:Tech"]``

    Returns:
        Built Facets, or None when no group was given

    Raises:
        ValueError: If a clause is not shaped ``attribute:value``
    """
    if not groups:
        return None

    builder: Optional[FacetBuilder] = None
    for group in groups:
        clauses = [c.strip() for c in group.split("|") if c.strip()]
        if not clauses:
            raise ValueError(f"Empty facet group: {group!r}")
        for i, clause in enumerate(clauses):
            key, sep, value = clause.partition(":")
            if not sep or not key:
                raise ValueError(f"Invalid facet {clause!r}. Use 'attribute:value'")
            if builder is None:
                builder = FacetBuilder.start(key, value)
            elif i == 0:
                builder.and_(key, value)
            else:
                builder.or_(key, value)
    return builder.build()


def parse_crop(specs: Optional[List[str]]) -> List[Crop]:
    """Parse ``--crop`` options: ``attr`` or ``attr:length``.

    Raises:
        ValueError: If a length is not an integer
    """
    crops: List[Crop] = []
    for spec in specs or []:
        attribute, sep, length = spec.rpartition(":")
        if not sep:
            crops.append(Attr(spec))
            continue
        try:
            crops.append(At(attribute, int(length)))
        except ValueError as e:
            raise ValueError(f"Invalid crop {spec!r}. Use 'attribute' or 'attribute:length'") from e
    return crops
