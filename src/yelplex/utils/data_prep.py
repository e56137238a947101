"""Data preparation for export."""

import json
import logging
from pathlib import Path
from typing import Dict, Any

import pandas as pd

from ..core.constants import ColumnConstants as C, ReportConstants
from ..core.exceptions import YelplexError
from ..core.models import PipelineResult

logger = logging.getLogger(__name__)

TABLE_COLUMNS = {
    "review_sentiment": C.REVIEW_SENTIMENT_COLUMNS,
    "word_summary": C.WORD_SUMMARY_COLUMNS,
    "word_lexicon": C.WORD_LEXICON_COLUMNS,
    "sentiment_by_stars": C.STARS_SUMMARY_COLUMNS,
}


def prepare_export(result: PipelineResult, source: str = "") -> Dict[str, Any]:
    """Prepare pipeline output for JSON export."""
    export_data = result.to_dict()
    export_data["metadata"] = {
        "source": source,
        "tokens": len(result.tokens),
        "scored_tokens": len(result.joined),
        "export_timestamp": None,  # Will be set by caller
        "version": ReportConstants.EXPORT_VERSION,
    }
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote {filename}")


def load_export(filename: str) -> Dict[str, pd.DataFrame]:
    """Read the aggregate tables back out of a file written by ``export_to_json``."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise YelplexError(f"Input file {filename} not found") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise YelplexError(f"Invalid JSON in input file: {e}") from e

    if not isinstance(data, dict):
        raise YelplexError(f"{filename} is not a yelplex export")
    missing = [name for name in TABLE_COLUMNS if not isinstance(data.get(name), list)]
    if missing:
        raise YelplexError(f"{filename} is not a yelplex export (missing {', '.join(missing)})")

    return {name: pd.DataFrame(data[name], columns=columns) for name, columns in TABLE_COLUMNS.items()}


def write_tables(tables: Dict[str, pd.DataFrame], directory: str) -> Dict[str, Path]:
    """Write each relation to ``<directory>/<name>.csv``."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = {}
    for name, frame in tables.items():
        path = out_dir / f"{name}.csv"
        frame.to_csv(path, index=False)
        written[name] = path
    logger.info(f"Wrote {len(written)} tables to {out_dir}")
    return written


def export_tables(result: PipelineResult, directory: str) -> Dict[str, Path]:
    """Write the aggregate relations of a pipeline run as CSV files."""
    return write_tables(result.tables(), directory)
