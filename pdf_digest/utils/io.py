import os
import json
import logging
from typing import Any, Dict, List
from pathlib import Path

from pdf_digest.errors import ConfigError

logger = logging.getLogger(__name__)


# Non-recursive listing of PDF files (case-insensitive extension)
def find_pdf_files(directory: str) -> List[str]:

    path = Path(directory)

    if not path.is_dir():
        raise ConfigError(f"PDF directory not found: {directory}")

    try:
        entries = sorted(path.iterdir())
    except OSError as exc:
        raise ConfigError(f"Cannot read PDF directory {directory}: {exc}") from exc

    return [
        str(entry)
        for entry in entries
        if entry.is_file() and entry.suffix.lower() == ".pdf"
    ]


# Final Results JSON
def write_json(path: str, data: Dict[str, Any]):

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.debug("Wrote %s", path)
