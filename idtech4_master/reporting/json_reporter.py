"""JSON report generator for master server queries.

Generates structured JSON reports from query results and failures.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..query.master_query import QueryConfig, QueryResult


class JsonReporter:
    """Generates JSON reports from master server query outcomes."""

    def generate(
        self,
        config: QueryConfig,
        result: Optional[QueryResult] = None,
        error: Optional[str] = None,
        duration_ms: int = 0,
    ) -> dict[str, Any]:
        """Generate a JSON report.

        Args:
            config: Settings the query ran with.
            result: Query result, None if the query failed.
            error: Error message if the query failed.
            duration_ms: Duration to report when result is None.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        servers = result.servers if result else []

        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "success": result is not None and error is None,
            "master": {
                "host": config.host,
                "address": result.address if result else None,
                "port": config.port,
            },
            "protocol": {
                "id": int(config.variant),
                "name": config.variant.label,
            },
            "mod": config.mod,
            "count": len(servers),
            "servers": [server.to_dict() for server in servers],
            "duration_ms": result.duration_ms if result else duration_ms,
            "error": error,
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Write the pretty-printed report to path, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps(report) + "\n", encoding="utf-8")
        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        return dumps(report, pretty=pretty)


def dumps(report: dict[str, Any], pretty: bool = True) -> str:
    """Serialize a report, rendering addresses and paths as strings."""
    return json.dumps(
        report,
        indent=2 if pretty else None,
        ensure_ascii=False,
        default=str,
    )
