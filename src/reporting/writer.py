"""
Writes rendered reports to disk.

The renderers stay pure; this is the one place that touches the file system.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

from core.errors import InvalidArgumentError
from reporting.renderers import FILE_EXTENSIONS, RENDERERS
from reporting.report import PerformanceReport

logger = logging.getLogger(__name__)


def write_reports(report: PerformanceReport, output_dir: Union[str, Path],
                  formats: Iterable[str] = ("markdown", "html", "csv"),
                  stem: str = "performance-report") -> Dict[str, Path]:
    """
    Render ``report`` in each of ``formats`` and write ``<stem>.<ext>`` files.

    Returns
    -------
    dict
        Format name -> path written.
    """
    formats = list(formats)
    unknown = [f for f in formats if f not in RENDERERS]
    if unknown:
        raise InvalidArgumentError(
            f"Unknown report format(s): {unknown}. Valid: {list(RENDERERS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: Dict[str, Path] = {}
    for fmt in formats:
        path = out / f"{stem}.{FILE_EXTENSIONS[fmt]}"
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(RENDERERS[fmt](report))
        logger.info("Report written to %s", path)
        written[fmt] = path
    return written
