"""
Resume Templates

Starter documents stored as YAML document records under
VITAE_TEMPLATES_PATH (defaults to the packaged templates/ directory).
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.document.logger import _log_debug
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.document.records import document_from_record

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", Path(__file__).parent / "templates"))


def list_templates(templates_path: Path = None) -> List[str]:
    """Names of the available templates (YAML file stems), sorted."""
    templates_path = Path(templates_path or TEMPLATES_PATH)
    if not templates_path.exists():
        return []
    return sorted(path.stem for path in templates_path.glob("*.yaml"))


def load_template(name: str, templates_path: Path = None) -> NodeStore:
    """
    Load a template into a new document. Every load gets fresh uuids.

    Args:
        name: Template name (e.g., "classic")
        templates_path: Optional templates directory (defaults to VITAE_TEMPLATES_PATH)

    Returns:
        NodeStore holding the template's tree

    Raises:
        FileNotFoundError: If the template doesn't exist
        InvalidRecordError: If the template isn't a valid document record
    """
    templates_path = Path(templates_path or TEMPLATES_PATH)
    template_path = templates_path / f"{name}.yaml"

    if not template_path.exists():
        raise FileNotFoundError(
            f"Template '{name}' not found at {template_path}. Available: {list_templates(templates_path)}"
        )

    record = OmegaConf.to_container(OmegaConf.load(template_path), resolve=True)
    store = document_from_record(record)

    _log_debug(f"Loaded template '{name}' ({len(store)} nodes) from {template_path}")
    return store
