import os
import json
import csv
from datetime import datetime, timezone
from typing import Dict, Sequence

from saathi.data.fixtures import AnalyticsSnapshot, Complaint
from saathi.utils import get_logger

logger = get_logger(__name__)

class Exporter:
    @staticmethod
    def save(report: str, analytics: AnalyticsSnapshot, complaints: Sequence[Complaint],
             predictions: Dict = None, out_dir: str = "outputs") -> Dict[str, str]:
        os.makedirs(out_dir, exist_ok=True)

        timestamp = datetime.now(timezone.utc).isoformat()
        paths = {
            "report.txt": os.path.join(out_dir, "report.txt"),
            "analytics.json": os.path.join(out_dir, "analytics.json"),
            "complaints.csv": os.path.join(out_dir, "complaints.csv"),
        }

        # Report text
        with open(paths["report.txt"], "w", encoding="utf-8") as f:
            f.write(report)

        # JSON
        payload = {
            "timestamp": timestamp,
            "analytics": analytics.model_dump(),
            "predictions": {
                k: {"alert": p.alert, "message": p.message, "percent_change": p.percent_change}
                for k, p in (predictions or {}).items()
            },
        }
        with open(paths["analytics.json"], "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

        # CSV
        with open(paths["complaints.csv"], "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "id", "timestamp", "title", "category", "district",
                "sentiment", "priority", "status", "user_name"
            ])
            for c in complaints:
                writer.writerow([
                    c.id,
                    c.timestamp.date().isoformat(),
                    c.title,
                    c.category,
                    c.location.district,
                    c.sentiment,
                    c.priority,
                    c.status,
                    c.user_name,
                ])

        logger.info(f"Exported report files to {out_dir}")
        return paths
